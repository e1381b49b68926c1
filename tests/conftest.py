"""
Pytest configuration and fixtures for webtrees
"""

import os

import pytest

from app import create_app
from webtrees.database import db as _db
from webtrees.database.models import DefaultResn, Family, Individual, User
from webtrees.repositories.block_repository import BlockRepository
from webtrees.repositories.record_repository import RecordRepository
from webtrees.repositories.tree_repository import TreeRepository
from webtrees.services.request_context import RequestContext


class BaseTestConfig:
    """Test configuration; SQLite in memory unless TEST_DATABASE_URL is set"""
    def __init__(self):
        self.secret_key = 'test-secret-key'
        self.sqlalchemy_database_uri = os.getenv('TEST_DATABASE_URL', 'sqlite:///:memory:')
        self.sqlalchemy_track_modifications = False


@pytest.fixture(scope="session")
def app():
    """Create Flask app for testing"""
    app = create_app(BaseTestConfig())
    app.config['TESTING'] = True
    return app


@pytest.fixture
def db(app):
    """Fresh tables for every test"""
    with app.app_context():
        _db.create_all()
        try:
            yield _db
        finally:
            _db.session.remove()
            _db.drop_all()


@pytest.fixture
def client(app, db):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def runner(app, db):
    """Create CLI test runner"""
    return app.test_cli_runner()


@pytest.fixture
def request_ctx(app, db):
    """A request context for code that renders templates or reads the session"""
    with app.test_request_context():
        yield


@pytest.fixture
def tree(db):
    """An empty tree with privacy enabled"""
    tree = TreeRepository().create_tree('demo', 'Demo family')
    db.session.commit()
    return tree


@pytest.fixture
def set_preference(db):
    def _set_preference(tree, name, value):
        TreeRepository().set_preference(tree, name, value)
        db.session.commit()
    return _set_preference


@pytest.fixture
def add_record(db, tree):
    """Store a record; the GEDCOM may omit its level 0 line"""
    repository = RecordRepository()

    def _add_record(record_class, xref, gedcom='', tree_id=None):
        record = repository.create_record(record_class, xref, tree_id or tree.id, gedcom)
        db.session.commit()
        return record
    return _add_record


@pytest.fixture
def add_link(db, tree):
    repository = RecordRepository()

    def _add_link(from_xref, link_type, to_xref, tree_id=None):
        link = repository.add_link(tree_id or tree.id, from_xref, link_type, to_xref)
        db.session.commit()
        return link
    return _add_link


@pytest.fixture
def add_resn(db, tree):
    def _add_resn(resn, xref=None, tag_type=None):
        _db.session.add(DefaultResn(tree_id=tree.id, xref=xref, tag_type=tag_type, resn=resn))
        db.session.commit()
    return _add_resn


@pytest.fixture
def make_user(db, tree):
    """A user with a role (canedit) and optionally an own individual in the tree"""
    def _make_user(user_name, role=None, gedcomid=None, is_admin=False):
        user = User(user_name=user_name, real_name=user_name.title(), is_admin=is_admin)
        _db.session.add(user)
        _db.session.flush()
        repository = TreeRepository()
        if role:
            repository.set_user_preference(tree, user, 'canedit', role)
        if gedcomid:
            repository.set_user_preference(tree, user, 'gedcomid', gedcomid)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_block(db, tree):
    def _make_block(module_name='charts', user=None, settings=None, location='main'):
        repository = BlockRepository()
        block = repository.create_block(
            module_name,
            tree_id=None if user is not None else tree.id,
            user_id=user.id if user is not None else None,
            location=location,
        )
        for name, value in (settings or {}).items():
            repository.set_setting(block.id, name, value)
        db.session.commit()
        return block
    return _make_block


@pytest.fixture
def family_tree(add_record):
    """Three generations: grandparents, parents and a child, all long dead"""
    add_record(Individual, 'I1', '1 NAME John /Smith/\n1 SEX M\n1 BIRT\n2 DATE 1 JAN 1850\n1 DEAT\n1 FAMS @F1@')
    add_record(Individual, 'I2', '1 NAME Mary /Jones/\n1 SEX F\n1 BIRT\n2 DATE 1852\n1 DEAT\n1 FAMS @F1@')
    add_record(Individual, 'I3', '1 NAME Peter /Smith/\n1 SEX M\n1 BIRT\n2 DATE 1880\n1 DEAT\n1 FAMC @F1@\n1 FAMS @F2@')
    add_record(Individual, 'I4', '1 NAME Anna /Brown/\n1 SEX F\n1 BIRT\n2 DATE 1882\n1 DEAT\n1 FAMS @F2@')
    add_record(Individual, 'I5', '1 NAME Paul /Smith/\n1 SEX M\n1 BIRT\n2 DATE 1905\n1 DEAT\n1 FAMC @F2@')

    add_record(Family, 'F1', '1 HUSB @I1@\n1 WIFE @I2@\n1 CHIL @I3@')
    add_record(Family, 'F2', '1 HUSB @I3@\n1 WIFE @I4@\n1 CHIL @I5@')


@pytest.fixture
def make_context(tree):
    """Viewing context for a user (None for visitors) without going through the session"""
    def _make_context(user=None, for_tree=None):
        return RequestContext(tree=for_tree or tree, user=user)
    return _make_context
