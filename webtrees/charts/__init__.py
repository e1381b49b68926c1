"""
Chart controllers used by chart blocks
"""

from .hourglass import HourglassController, print_pedigree_person
from .tree_view import TreeView


__all__ = [
    'HourglassController',
    'TreeView',
    'print_pedigree_person',
]
