"""
Tree dashboard and the signed-in user's own page
"""

from flask import Blueprint, flash, redirect, render_template, url_for

from webtrees.blueprints.blueprint_utils import build_context, render_blocks
from webtrees.repositories.block_repository import BlockRepository
from webtrees.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

tree_bp = Blueprint('tree', __name__, url_prefix='/tree')


@tree_bp.route('/<tree_name>')
def dashboard(tree_name):
    """Home page of a tree with all of its blocks"""
    context = build_context(tree_name)
    blocks = BlockRepository().get_tree_blocks(context.tree.id)
    return render_template(
        'tree/dashboard.html',
        tree=context.tree,
        heading=context.tree.title,
        blocks=render_blocks(context, blocks),
    )


@tree_bp.route('/<tree_name>/my-page')
def my_page(tree_name):
    """The signed-in user's own dashboard"""
    context = build_context(tree_name)
    if not context.is_signed_in:
        logger.debug(f"Visitor asked for my page of {tree_name}")
        flash('You must sign in to see your page', 'error')
        return redirect(url_for('tree.dashboard', tree_name=tree_name))

    blocks = BlockRepository().get_user_blocks(context.user.id)
    return render_template(
        'tree/dashboard.html',
        tree=context.tree,
        heading='My page',
        blocks=render_blocks(context, blocks),
    )
