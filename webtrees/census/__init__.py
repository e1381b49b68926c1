"""
Columns of census transcription forms
"""

from .census_column import AbstractCensusColumn, CensusColumnOccupation


__all__ = [
    'AbstractCensusColumn',
    'CensusColumnOccupation',
]
