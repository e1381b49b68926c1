"""
Service for viewing media objects
"""

from webtrees.database.models import GedcomRecord, Media
from webtrees.repositories.record_repository import RecordRepository
from webtrees.services.base_service import BaseService
from webtrees.services.exceptions import NotFoundError, PermissionDeniedError, handle_service_exceptions
from webtrees.shared.logging_config import get_project_logger
from webtrees.shared.privacy import PRIV_PRIVATE


logger = get_project_logger(__name__)


class MediaService(BaseService):
    """Media objects as a viewer is allowed to see them"""

    def __init__(self, db_session=None):
        super().__init__(db_session)
        self.record_repository = RecordRepository(self.db_session)

    @handle_service_exceptions(logger)
    def get_media(self, tree_id: int, xref: str) -> Media:
        media = self.record_repository.get_instance(xref, tree_id, Media)
        if media is None:
            raise NotFoundError(f"Media object {xref} not found")
        return media

    @handle_service_exceptions(logger)
    def get_visible_media(self, context, xref: str) -> Media:
        """A media object the viewer may see; hidden objects count as forbidden"""
        media = self.get_media(context.tree.id, xref)
        if not media.can_show(context.access_level):
            logger.info(f"Media {xref} hidden at access level {context.access_level}")
            raise PermissionDeniedError(f"Media object {xref} is private")
        return media

    @handle_service_exceptions(logger)
    def list_visible_media(self, context) -> list[Media]:
        return [
            media for media in self.record_repository.get_all_media(context.tree.id)
            if media.can_show(context.access_level)
        ]

    @handle_service_exceptions(logger)
    def get_linked_records(self, media: Media, access_level: int) -> list[GedcomRecord]:
        """Records linking to a media object that the viewer may see"""
        linked = []
        for xref in sorted(self.record_repository.fetch_linked_from_ids(media.xref, media.tree_id)):
            record = self.record_repository.get_instance(xref, media.tree_id)
            if record is not None and record.can_show(access_level):
                linked.append(record)
        return linked

    def describe(self, media: Media, access_level: int = PRIV_PRIVATE) -> dict:
        """Names, files, first image, note and linking records of a media object"""
        first_image = media.first_image_file()
        return {
            'xref': media.xref,
            'names': [name['full'] for name in media.get_all_names()],
            'files': [
                {
                    'filename': media_file.filename(),
                    'title': media_file.title(),
                    'format': media_file.format(),
                    'type': media_file.type(),
                    'mime_type': media_file.mime_type(),
                    'is_image': media_file.is_image(),
                    'is_external': media_file.is_external(),
                }
                for media_file in media.media_files()
            ],
            'first_image': first_image.filename() if first_image is not None else None,
            'note': media.get_note(),
            'linked': [
                {'xref': record.xref, 'type': record.RECORD_TYPE, 'name': record.get_full_name()}
                for record in self.get_linked_records(media, access_level)
            ],
        }
