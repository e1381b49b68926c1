"""
Tests for Flask CLI commands
"""

from webtrees.database.models import Individual, Media
from webtrees.repositories.tree_repository import TreeRepository


class TestCLICommands:
    """Test Flask CLI commands"""

    def test_init_db(self, runner):
        result = runner.invoke(args=['init-db'])

        assert result.exit_code == 0
        assert '✅ Database tables created' in result.output

    def test_create_tree(self, runner):
        result = runner.invoke(args=['create-tree', 'kennedy', '--title', 'The Kennedys', '--root-id', 'I1'])

        assert result.exit_code == 0
        assert '✅ Created tree kennedy' in result.output
        tree = TreeRepository().get_by_name('kennedy')
        assert tree.title == 'The Kennedys'
        assert tree.get_preference('PEDIGREE_ROOT_ID') == 'I1'

    def test_create_existing_tree_fails(self, runner, tree):
        result = runner.invoke(args=['create-tree', 'demo'])

        assert result.exit_code == 1
        assert '❌ Tree demo already exists' in result.output

    def test_media_info(self, runner, add_record):
        add_record(Media, 'M1', '1 FILE scan.pdf\n1 FILE photo.jpg\n2 TITL Portrait\n1 NOTE In the attic')

        result = runner.invoke(args=['media-info', 'demo', 'M1'])

        assert result.exit_code == 0
        assert '🖼️ Media object M1' in result.output
        assert 'File: scan.pdf (application/octet-stream)' in result.output
        assert 'File: photo.jpg (image)' in result.output
        assert 'First image: photo.jpg' in result.output
        assert 'Note: In the attic' in result.output
        assert 'Visible to visitors: yes' in result.output

    def test_media_info_private_object(self, runner, add_record, add_link):
        add_record(Individual, 'I1', '1 NAME Living /Person/\n1 BIRT\n2 DATE 2001')
        add_record(Media, 'M1', '1 FILE photo.jpg')
        add_link('I1', 'OBJE', 'M1')

        result = runner.invoke(args=['media-info', 'demo', 'M1'])

        assert result.exit_code == 0
        assert 'Visible to visitors: no' in result.output
        assert 'Linked from' not in result.output

    def test_media_info_linked_records(self, runner, add_record, add_link):
        add_record(Individual, 'I1', '1 NAME Dead /Person/\n1 DEAT Y')
        add_record(Media, 'M1', '1 FILE photo.jpg')
        add_link('I1', 'OBJE', 'M1')

        result = runner.invoke(args=['media-info', 'demo', 'M1'])

        assert result.exit_code == 0
        assert 'Linked from: Dead Person (I1)' in result.output

    def test_media_info_unknown_tree(self, runner):
        result = runner.invoke(args=['media-info', 'missing', 'M1'])

        assert result.exit_code == 1
        assert '❌ Tree missing not found' in result.output

    def test_media_info_unknown_media(self, runner, tree):
        result = runner.invoke(args=['media-info', 'demo', 'M9'])

        assert result.exit_code == 1
        assert 'Media object M9 not found' in result.output
