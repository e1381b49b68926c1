"""Initial schema: trees, users, GEDCOM records, links and blocks

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-16 09:12:41.518204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a9b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'trees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_name', sa.String(length=32), nullable=False),
        sa.Column('real_name', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(length=64), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_name'),
    )
    op.create_table(
        'tree_settings',
        sa.Column('tree_id', sa.Integer(), nullable=False),
        sa.Column('setting_name', sa.String(length=32), nullable=False),
        sa.Column('setting_value', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id']),
        sa.PrimaryKeyConstraint('tree_id', 'setting_name'),
    )
    op.create_table(
        'default_resn',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tree_id', sa.Integer(), nullable=False),
        sa.Column('xref', sa.String(length=20), nullable=True),
        sa.Column('tag_type', sa.String(length=15), nullable=True),
        sa.Column('resn', sa.String(length=12), nullable=False),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_default_resn_tree', 'default_resn', ['tree_id'])
    op.create_table(
        'user_tree_settings',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('tree_id', sa.Integer(), nullable=False),
        sa.Column('setting_name', sa.String(length=32), nullable=False),
        sa.Column('setting_value', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id']),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('user_id', 'tree_id', 'setting_name'),
    )
    op.create_table(
        'gedcom_records',
        sa.Column('xref', sa.String(length=20), nullable=False),
        sa.Column('tree_id', sa.Integer(), nullable=False),
        sa.Column('record_type', sa.String(length=15), nullable=False),
        sa.Column('gedcom', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id']),
        sa.PrimaryKeyConstraint('xref', 'tree_id'),
    )
    op.create_index('idx_gedcom_records_type', 'gedcom_records', ['tree_id', 'record_type'])
    op.create_table(
        'links',
        sa.Column('tree_id', sa.Integer(), nullable=False),
        sa.Column('from_xref', sa.String(length=20), nullable=False),
        sa.Column('link_type', sa.String(length=15), nullable=False),
        sa.Column('to_xref', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id']),
        sa.PrimaryKeyConstraint('tree_id', 'from_xref', 'link_type', 'to_xref'),
    )
    op.create_index('idx_links_to', 'links', ['to_xref', 'tree_id'])
    op.create_table(
        'blocks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tree_id', sa.Integer(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('location', sa.String(length=4), nullable=True),
        sa.Column('block_order', sa.Integer(), nullable=True),
        sa.Column('module_name', sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id']),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'block_settings',
        sa.Column('block_id', sa.Integer(), nullable=False),
        sa.Column('setting_name', sa.String(length=32), nullable=False),
        sa.Column('setting_value', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['block_id'], ['blocks.id']),
        sa.PrimaryKeyConstraint('block_id', 'setting_name'),
    )


def downgrade():
    op.drop_table('block_settings')
    op.drop_table('blocks')
    op.drop_index('idx_links_to', table_name='links')
    op.drop_table('links')
    op.drop_index('idx_gedcom_records_type', table_name='gedcom_records')
    op.drop_table('gedcom_records')
    op.drop_table('user_tree_settings')
    op.drop_index('idx_default_resn_tree', table_name='default_resn')
    op.drop_table('default_resn')
    op.drop_table('users')
    op.drop_table('tree_settings')
    op.drop_table('trees')
