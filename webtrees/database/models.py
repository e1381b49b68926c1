"""
SQLAlchemy models for trees, users, GEDCOM records, links and dashboard blocks
"""

import re
from datetime import UTC, datetime

from webtrees.shared.gedcom_facts import Fact, GedcomFactParser
from webtrees.shared.media_file import MediaFile
from webtrees.shared.privacy import (
    PRIV_HIDE,
    PRIV_NONE,
    PRIV_PRIVATE,
    PRIV_USER,
    RESN_LEVELS,
)

from . import db


class Tree(db.Model):
    """A family tree, the unit that records, settings and blocks belong to"""
    __tablename__ = 'trees'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False, unique=True)
    title = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(UTC))

    settings = db.relationship('TreeSetting', back_populates='tree', cascade='all, delete-orphan')

    def get_preference(self, setting_name: str, default: str = '') -> str:
        setting = db.session.get(TreeSetting, {'tree_id': self.id, 'setting_name': setting_name})
        return setting.setting_value if setting is not None else default

    def get_user_preference(self, user, setting_name: str, default: str = '') -> str:
        """Per-user setting in this tree (gedcomid, canedit); default for visitors"""
        if user is None:
            return default
        setting = db.session.get(UserTreeSetting, {
            'user_id': user.id,
            'tree_id': self.id,
            'setting_name': setting_name,
        })
        return setting.setting_value if setting is not None else default

    def get_fact_privacy(self) -> dict[str, int]:
        """Default restrictions by record type"""
        rows = db.session.execute(
            db.select(DefaultResn).where(
                DefaultResn.tree_id == self.id,
                DefaultResn.xref.is_(None),
                DefaultResn.tag_type.is_not(None),
            )
        ).scalars()
        return {row.tag_type: RESN_LEVELS[row.resn] for row in rows if row.resn in RESN_LEVELS}

    def get_individual_privacy(self) -> dict[str, int]:
        """Default restrictions for individual records"""
        rows = db.session.execute(
            db.select(DefaultResn).where(
                DefaultResn.tree_id == self.id,
                DefaultResn.xref.is_not(None),
                DefaultResn.tag_type.is_(None),
            )
        ).scalars()
        return {row.xref: RESN_LEVELS[row.resn] for row in rows if row.resn in RESN_LEVELS}

    def __repr__(self):
        return f'<Tree {self.name}>'


class TreeSetting(db.Model):
    """Key/value preference of a tree (PEDIGREE_ROOT_ID, HIDE_LIVE_PEOPLE, ...)"""
    __tablename__ = 'tree_settings'

    tree_id = db.Column(db.Integer, db.ForeignKey('trees.id'), primary_key=True)
    setting_name = db.Column(db.String(32), primary_key=True)
    setting_value = db.Column(db.Text, nullable=False, default='')

    tree = db.relationship('Tree', back_populates='settings')

    def __repr__(self):
        return f'<TreeSetting {self.setting_name}={self.setting_value!r}>'


class DefaultResn(db.Model):
    """Default restriction for a record type (xref empty) or one record (tag_type empty)"""
    __tablename__ = 'default_resn'

    id = db.Column(db.Integer, primary_key=True)
    tree_id = db.Column(db.Integer, db.ForeignKey('trees.id'), nullable=False)
    xref = db.Column(db.String(20))
    tag_type = db.Column(db.String(15))
    resn = db.Column(db.String(12), nullable=False)  # none, privacy, confidential, hidden

    __table_args__ = (
        db.Index('idx_default_resn_tree', 'tree_id'),
    )

    def __repr__(self):
        return f'<DefaultResn {self.xref or self.tag_type}={self.resn}>'


class User(db.Model):
    """A registered user; sign-in itself is handled outside this application"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    user_name = db.Column(db.String(32), nullable=False, unique=True)
    real_name = db.Column(db.String(64), nullable=False, default='')
    email = db.Column(db.String(64))
    is_admin = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(UTC))

    def __repr__(self):
        return f'<User {self.user_name}>'


class UserTreeSetting(db.Model):
    """Per-tree setting of a user: gedcomid (own individual) and canedit (role)"""
    __tablename__ = 'user_tree_settings'

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), primary_key=True)
    tree_id = db.Column(db.Integer, db.ForeignKey('trees.id'), primary_key=True)
    setting_name = db.Column(db.String(32), primary_key=True)
    setting_value = db.Column(db.String(255), nullable=False, default='')

    def __repr__(self):
        return f'<UserTreeSetting {self.user_id}/{self.tree_id} {self.setting_name}>'


class GedcomRecord(db.Model):
    """Base class of all GEDCOM level 0 records, keyed by (xref, tree_id)

    Instances are loaded lazily and cached for the request by the session
    identity map. The GEDCOM text is never modified after loading, so parsed
    facts, names and visibility decisions are cached on the instance.
    """
    __tablename__ = 'gedcom_records'

    RECORD_TYPE = None

    xref = db.Column(db.String(20), primary_key=True)
    tree_id = db.Column(db.Integer, db.ForeignKey('trees.id'), primary_key=True)
    record_type = db.Column(db.String(15), nullable=False)
    gedcom = db.Column(db.Text, nullable=False, default='')
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(UTC))

    tree = db.relationship('Tree')

    __mapper_args__ = {'polymorphic_on': record_type}

    __table_args__ = (
        db.Index('idx_gedcom_records_type', 'tree_id', 'record_type'),
    )

    # Per-instance caches, not mapped
    _parsed_facts = None
    _names = None
    _disp = None

    @classmethod
    def fetch_gedcom_record(cls, xref: str, tree_id: int) -> str | None:
        """Raw GEDCOM text of a record of this type, None when absent"""
        stmt = db.select(GedcomRecord.gedcom).where(
            GedcomRecord.xref == xref,
            GedcomRecord.tree_id == tree_id,
        )
        if cls.RECORD_TYPE is not None:
            stmt = stmt.where(GedcomRecord.record_type == cls.RECORD_TYPE)
        return db.session.execute(stmt).scalar_one_or_none()

    @classmethod
    def get_instance(cls, xref: str | None, tree_id: int):
        """Record of this class (or a subclass), None when missing or of another type"""
        if not xref:
            return None
        record = db.session.get(GedcomRecord, {'xref': xref, 'tree_id': tree_id})
        if record is None or not isinstance(record, cls):
            return None
        return record

    def lookup_record(self, xref: str):
        """Resolve another record in the same tree"""
        return GedcomRecord.get_instance(xref, self.tree_id)

    # Facts

    def get_facts(self, tag: str | None = None) -> list[Fact]:
        """Level 1 facts, optionally filtered by a tag or "TAG1|TAG2" list"""
        if self._parsed_facts is None:
            self._parsed_facts = GedcomFactParser().parse(self.gedcom, parent=self)
        if tag is None:
            return list(self._parsed_facts)
        tags = tag.split('|')
        return [fact for fact in self._parsed_facts if fact.tag in tags]

    def get_first_fact(self, tag: str) -> Fact | None:
        facts = self.get_facts(tag)
        return facts[0] if facts else None

    # Visibility

    def can_show(self, access_level: int) -> bool:
        """Can a viewer at this access level see the record?"""
        if access_level == PRIV_HIDE:
            return True
        if self._disp is None:
            self._disp = {}
        if access_level not in self._disp:
            # A record reached again through a cycle of links does not block itself
            self._disp[access_level] = True
            self._disp[access_level] = self.can_show_record(access_level)
        return self._disp[access_level]

    def can_show_record(self, access_level: int) -> bool:
        # HIDE_LIVE_PEOPLE is the switch that enables privacy as a whole
        if self.tree.get_preference('HIDE_LIVE_PEOPLE', '1') != '1':
            return True

        for resn in ('confidential', 'privacy', 'none'):
            if f'\n1 RESN {resn}' in self.gedcom:
                return RESN_LEVELS[resn] >= access_level

        individual_privacy = self.tree.get_individual_privacy()
        if self.xref in individual_privacy:
            return individual_privacy[self.xref] >= access_level

        # Managers see everything else
        if access_level <= PRIV_NONE:
            return True

        return self.can_show_by_type(access_level)

    def can_show_by_type(self, access_level: int) -> bool:
        """Default rule; record types with their own rules override this"""
        fact_privacy = self.tree.get_fact_privacy()
        if self.RECORD_TYPE in fact_privacy:
            return fact_privacy[self.RECORD_TYPE] >= access_level
        return True

    # Names

    def add_name(self, name_type: str, value: str, gedcom: str | None = None) -> None:
        if self._names is None:
            self._names = []
        self._names.append({'type': name_type, 'full': value, 'sort': value.lower(), 'gedcom': gedcom})

    def extract_names(self) -> None:
        """Register the names of this record from its NAME facts"""
        for fact in self.get_facts('NAME'):
            if fact.value:
                self.add_name(fact.tag, fact.value, fact.gedcom)

    def get_fallback_name(self) -> str:
        return self.xref

    def get_all_names(self) -> list[dict]:
        """Names of the record, extracted once; never empty"""
        if self._names is None:
            self._names = []
            self.extract_names()
            if not self._names:
                self.add_name(self.RECORD_TYPE or '', self.get_fallback_name())
        return self._names

    def get_full_name(self) -> str:
        return self.get_all_names()[0]['full']

    def get_display_name(self, access_level: int) -> str:
        return self.get_full_name() if self.can_show(access_level) else 'Private'

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.xref}@{self.tree_id}>'


class Individual(GedcomRecord):
    """An INDI record"""
    RECORD_TYPE = 'INDI'

    __mapper_args__ = {'polymorphic_identity': 'INDI'}

    def extract_names(self) -> None:
        for fact in self.get_facts('NAME'):
            full_name = ' '.join(fact.value.replace('/', ' ').split())
            if full_name:
                self.add_name('NAME', full_name, fact.gedcom)

    def get_fallback_name(self) -> str:
        return '@P.N. @N.N.'

    def get_sex(self) -> str:
        fact = self.get_first_fact('SEX')
        return fact.value if fact is not None and fact.value in ('M', 'F') else 'U'

    def get_birth_year(self) -> int | None:
        fact = self.get_first_fact('BIRT')
        if fact is None:
            return None
        match = re.search(r'\b(\d{3,4})\b', fact.get_attribute('DATE'))
        return int(match.group(1)) if match else None

    def is_dead(self) -> bool:
        if self.get_facts('DEAT|BURI|CREM'):
            return True
        birth_year = self.get_birth_year()
        if birth_year is None:
            return False
        max_alive_age = self.tree.get_preference('MAX_ALIVE_AGE', '120')
        max_alive_age = int(max_alive_age) if max_alive_age.isdigit() else 120
        return datetime.now(UTC).year - birth_year > max_alive_age

    def can_show_by_type(self, access_level: int) -> bool:
        show_dead = int(self.tree.get_preference('SHOW_DEAD_PEOPLE', str(PRIV_PRIVATE)))
        if show_dead >= access_level and self.is_dead():
            return True
        # Living people are only shown to members
        return access_level <= PRIV_USER

    def _linked_families(self, tag: str) -> list['Family']:
        families = []
        for fact in self.get_facts(tag):
            family = fact.get_target()
            if isinstance(family, Family):
                families.append(family)
        return families

    def get_child_families(self) -> list['Family']:
        return self._linked_families('FAMC')

    def get_spouse_families(self) -> list['Family']:
        return self._linked_families('FAMS')

    def get_primary_child_family(self) -> 'Family | None':
        families = self.get_child_families()
        return families[0] if families else None


class Family(GedcomRecord):
    """A FAM record"""
    RECORD_TYPE = 'FAM'

    __mapper_args__ = {'polymorphic_identity': 'FAM'}

    def _linked_individuals(self, tag: str) -> list[Individual]:
        individuals = []
        for fact in self.get_facts(tag):
            individual = fact.get_target()
            if isinstance(individual, Individual):
                individuals.append(individual)
        return individuals

    def get_husband(self) -> Individual | None:
        husbands = self._linked_individuals('HUSB')
        return husbands[0] if husbands else None

    def get_wife(self) -> Individual | None:
        wives = self._linked_individuals('WIFE')
        return wives[0] if wives else None

    def get_spouses(self) -> list[Individual]:
        return self._linked_individuals('HUSB|WIFE')

    def get_spouse(self, individual: Individual) -> Individual | None:
        for spouse in self.get_spouses():
            if spouse.xref != individual.xref:
                return spouse
        return None

    def get_children(self) -> list[Individual]:
        return self._linked_individuals('CHIL')

    def extract_names(self) -> None:
        spouses = self.get_spouses()
        if spouses:
            self.add_name('FAM', ' + '.join(spouse.get_full_name() for spouse in spouses))

    def can_show_by_type(self, access_level: int) -> bool:
        # Hide a family if any member is private
        for member in self._linked_individuals('HUSB|WIFE|CHIL'):
            if not member.can_show(access_level):
                return False
        return True


class Note(GedcomRecord):
    """A shared NOTE record"""
    RECORD_TYPE = 'NOTE'

    __mapper_args__ = {'polymorphic_identity': 'NOTE'}

    def get_note(self) -> str:
        return GedcomFactParser.record_value(self.gedcom)

    def extract_names(self) -> None:
        text = self.get_note().split('\n', 1)[0].strip()
        if text:
            self.add_name('NOTE', text[:100])


class Source(GedcomRecord):
    """A SOUR record"""
    RECORD_TYPE = 'SOUR'

    __mapper_args__ = {'polymorphic_identity': 'SOUR'}

    def extract_names(self) -> None:
        for fact in self.get_facts('TITL'):
            if fact.value:
                self.add_name('TITL', fact.value, fact.gedcom)


class Media(GedcomRecord):
    """A GEDCOM media (OBJE) object"""
    RECORD_TYPE = 'OBJE'

    __mapper_args__ = {'polymorphic_identity': 'OBJE'}

    def can_show_by_type(self, access_level: int) -> bool:
        # Hide media objects if they are attached to private records
        for linked_id in Link.linked_from_ids(self.xref, self.tree_id):
            linked_record = GedcomRecord.get_instance(linked_id, self.tree_id)
            if linked_record is not None and not linked_record.can_show(access_level):
                return False

        return super().can_show_by_type(access_level)

    def media_files(self) -> list[MediaFile]:
        """The FILE facts of this object, in record order"""
        return [MediaFile(fact, self) for fact in self.get_facts('FILE')]

    def first_image_file(self) -> MediaFile | None:
        for media_file in self.media_files():
            if media_file.is_image():
                return media_file
        return None

    def get_note(self) -> str:
        """Text of the first note, following a pointer to a shared note"""
        note = self.get_first_fact('NOTE')
        if note is None:
            return ''
        if note.target_xref is not None:
            target = note.get_target()
            return target.get_note() if isinstance(target, Note) else ''
        return note.value

    def extract_names(self) -> None:
        names = []
        for media_file in self.media_files():
            names.append(media_file.title())
            names.append(media_file.filename())
        names = [name for name in dict.fromkeys(names) if name]

        if not names:
            names.append(self.get_fallback_name())

        for name in names:
            self.add_name(self.RECORD_TYPE, name)


class Link(db.Model):
    """Directed reference from one record to another, e.g. INDI -OBJE-> OBJE"""
    __tablename__ = 'links'

    tree_id = db.Column(db.Integer, db.ForeignKey('trees.id'), primary_key=True)
    from_xref = db.Column(db.String(20), primary_key=True)
    link_type = db.Column(db.String(15), primary_key=True)
    to_xref = db.Column(db.String(20), primary_key=True)

    __table_args__ = (
        db.Index('idx_links_to', 'to_xref', 'tree_id'),
    )

    @classmethod
    def linked_from_ids(cls, xref: str, tree_id: int) -> list[str]:
        """Xrefs of all records that link to this one"""
        return list(db.session.execute(
            db.select(cls.from_xref).where(
                cls.to_xref == xref,
                cls.tree_id == tree_id,
            ).distinct()
        ).scalars())

    def __repr__(self):
        return f'<Link {self.from_xref} -{self.link_type}-> {self.to_xref}>'


class Block(db.Model):
    """A block on the tree dashboard (user_id empty) or on a user's own page"""
    __tablename__ = 'blocks'

    id = db.Column(db.Integer, primary_key=True)
    tree_id = db.Column(db.Integer, db.ForeignKey('trees.id'))
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'))
    location = db.Column(db.String(4), default='main')  # main, side
    block_order = db.Column(db.Integer, default=0)
    module_name = db.Column(db.String(32), nullable=False)

    settings = db.relationship('BlockSetting', back_populates='block', cascade='all, delete-orphan')

    @property
    def context_type(self) -> str:
        """'user' for personal dashboards, 'gedcom' for tree dashboards"""
        return 'user' if self.user_id is not None else 'gedcom'

    def __repr__(self):
        return f'<Block {self.id} {self.module_name}>'


class BlockSetting(db.Model):
    """Key/value setting of a block"""
    __tablename__ = 'block_settings'

    block_id = db.Column(db.Integer, db.ForeignKey('blocks.id'), primary_key=True)
    setting_name = db.Column(db.String(32), primary_key=True)
    setting_value = db.Column(db.Text, nullable=False, default='')

    block = db.relationship('Block', back_populates='settings')

    def __repr__(self):
        return f'<BlockSetting {self.block_id} {self.setting_name}={self.setting_value!r}>'
