"""
A single FILE fact of a media object
"""

import re
from pathlib import PurePosixPath
from urllib.parse import urlsplit


SUPPORTED_IMAGE_MIME_TYPES = {
    'bmp': 'image/bmp',
    'gif': 'image/gif',
    'jpeg': 'image/jpeg',
    'jpg': 'image/jpeg',
    'png': 'image/png',
    'tif': 'image/tiff',
    'tiff': 'image/tiff',
    'webp': 'image/webp',
}


class MediaFile:
    """One file attached to a media object, owned by that object"""

    def __init__(self, fact, media):
        self.fact = fact
        self.media = media

        self.multimedia_file_refn = self._match(r'^\d FILE (.+)$')
        self.multimedia_format = self._match(r'^\d FORM (.+)$')
        self.source_media_type = self._match(r'^\d TYPE (.+)$')
        self.descriptive_title = self._match(r'^\d TITL (.+)$')

    def _match(self, pattern: str) -> str:
        match = re.search(pattern, self.fact.gedcom, re.MULTILINE)
        return match.group(1).strip() if match else ''

    def filename(self) -> str:
        return self.multimedia_file_refn

    def title(self) -> str:
        return self.descriptive_title

    def format(self) -> str:
        return self.multimedia_format

    def type(self) -> str:
        return self.source_media_type

    def extension(self) -> str:
        """Lower-case file extension, falling back to the FORM value"""
        suffix = PurePosixPath(self.multimedia_file_refn.split('?', 1)[0]).suffix
        if suffix:
            return suffix[1:].lower()
        return self.multimedia_format.lower()

    def mime_type(self) -> str:
        return SUPPORTED_IMAGE_MIME_TYPES.get(self.extension(), 'application/octet-stream')

    def is_image(self) -> bool:
        return self.extension() in SUPPORTED_IMAGE_MIME_TYPES

    def is_external(self) -> bool:
        return urlsplit(self.multimedia_file_refn).scheme.lower() in ('http', 'https')

    def __repr__(self):
        return f'<MediaFile {self.multimedia_file_refn}>'
