"""
Repository layer for data access
"""

from .block_repository import BlockRepository
from .record_repository import RecordRepository
from .tree_repository import TreeRepository


__all__ = [
    'BlockRepository',
    'RecordRepository',
    'TreeRepository',
]
