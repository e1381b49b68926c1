"""
Repository for GEDCOM records and the links between them
"""

from webtrees.database import db
from webtrees.database.models import GedcomRecord, Link, Media
from webtrees.repositories.base_repository import BaseRepository


class RecordRepository(BaseRepository):
    """Lookups and writes for GEDCOM records of any type"""

    def fetch_linked_from_ids(self, xref: str, tree_id: int) -> list[str]:
        """Xrefs of all records linking to this one"""
        return self.safe_query(
            lambda: Link.linked_from_ids(xref, tree_id),
            f"fetch links to {xref}"
        )

    def get_instance(self, xref: str | None, tree_id: int, record_class: type[GedcomRecord] = GedcomRecord):
        """Record of the given class, None when missing or of another type"""
        return self.safe_query(
            lambda: record_class.get_instance(xref, tree_id),
            f"get {record_class.__name__} {xref}"
        )

    def get_all_media(self, tree_id: int) -> list[Media]:
        def _get_all_media():
            return self.db_session.execute(
                db.select(Media).where(Media.tree_id == tree_id).order_by(Media.xref)
            ).scalars().all()

        return self.safe_query(_get_all_media, "get all media")

    def create_record(self, record_class: type[GedcomRecord], xref: str, tree_id: int, gedcom: str) -> GedcomRecord:
        """Store a new record; the level 0 line is added when missing"""
        if not gedcom.startswith('0 '):
            gedcom = f'0 @{xref}@ {record_class.RECORD_TYPE}\n{gedcom}'

        def _create():
            record = record_class(xref=xref, tree_id=tree_id, gedcom=gedcom.rstrip('\n'))
            self.db_session.add(record)
            return record

        return self.safe_operation(_create, f"create {record_class.__name__} {xref}")

    def add_link(self, tree_id: int, from_xref: str, link_type: str, to_xref: str) -> Link:
        def _add_link():
            link = Link(tree_id=tree_id, from_xref=from_xref, link_type=link_type, to_xref=to_xref)
            self.db_session.add(link)
            return link

        return self.safe_operation(_add_link, f"link {from_xref} -> {to_xref}")
