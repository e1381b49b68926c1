"""
Flask CLI commands for webtrees
"""

import click

from webtrees.database import db, init_db
from webtrees.repositories.tree_repository import TreeRepository
from webtrees.services.exceptions import NotFoundError
from webtrees.services.media_service import MediaService
from webtrees.shared.privacy import PRIV_PRIVATE


def register_commands(app):
    """Register all CLI commands with the Flask app"""

    @app.cli.command('init-db')
    def init_db_command():
        """Create database tables."""
        init_db()
        click.echo("✅ Database tables created")

    @app.cli.command('create-tree')
    @click.argument('name')
    @click.option('--title', default='', help='Title shown on the tree dashboard')
    @click.option('--root-id', default='', help='Xref of the default individual for charts')
    def create_tree(name, title, root_id):
        """Create a new family tree."""
        repository = TreeRepository()
        if repository.get_by_name(name) is not None:
            click.echo(f"❌ Tree {name} already exists")
            exit(1)

        tree = repository.create_tree(name, title)
        if root_id:
            repository.set_preference(tree, 'PEDIGREE_ROOT_ID', root_id)
        db.session.commit()
        click.echo(f"✅ Created tree {tree.name}")

    @app.cli.command('media-info')
    @click.argument('tree_name')
    @click.argument('xref')
    def media_info(tree_name, xref):
        """Show names, files and visibility of a media object."""
        tree = TreeRepository().get_by_name(tree_name)
        if tree is None:
            click.echo(f"❌ Tree {tree_name} not found")
            exit(1)

        media_service = MediaService()
        try:
            media = media_service.get_media(tree.id, xref)
        except NotFoundError as e:
            click.echo(f"❌ {e}")
            exit(1)

        details = media_service.describe(media)
        click.echo(f"🖼️ Media object {details['xref']}")
        click.echo(f"  - Names: {', '.join(details['names'])}")
        for media_file in details['files']:
            kind = 'image' if media_file['is_image'] else media_file['mime_type']
            click.echo(f"  - File: {media_file['filename']} ({kind})")
        click.echo(f"  - First image: {details['first_image'] or 'none'}")
        if details['note']:
            click.echo(f"  - Note: {details['note']}")
        for record in details['linked']:
            click.echo(f"  - Linked from: {record['name']} ({record['xref']})")
        visible = media.can_show(PRIV_PRIVATE)
        click.echo(f"  - Visible to visitors: {'yes' if visible else 'no'}")
