"""
Shared utilities for GEDCOM records: fact parsing, media files and privacy levels
"""

from .gedcom_facts import XREF_REGEX, Fact, GedcomFactParser
from .media_file import MediaFile


__all__ = [
    'Fact', 'GedcomFactParser', 'MediaFile', 'XREF_REGEX'
]
