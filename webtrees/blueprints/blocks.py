"""
Blocks blueprint: render one block and edit its settings
"""

from flask import Blueprint, abort, flash, redirect, render_template, request

from webtrees.blueprints.blueprint_utils import build_context, dashboard_url, load_block_or_404
from webtrees.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

blocks = Blueprint('blocks', __name__, url_prefix='/tree')


@blocks.route('/<tree_name>/block/<int:block_id>')
def show(tree_name, block_id):
    """One block, e.g. loaded by AJAX; ?template=0 returns the bare content"""
    context = build_context(tree_name)
    block, module = load_block_or_404(context, block_id)
    template = request.args.get('template', '1') != '0'
    return module.get_block(context, block.id, template=template)


@blocks.route('/<tree_name>/block/<int:block_id>/edit', methods=['GET', 'POST'])
def edit(tree_name, block_id):
    """Show and save the settings form of a block"""
    context = build_context(tree_name)
    block, module = load_block_or_404(context, block_id)

    if not context.can_configure_block(block):
        abort(403)

    if request.method == 'POST':
        if module.configure_block(context, block.id, request.form):
            logger.info(f"Block {block.id} preferences updated in tree {context.tree.name}")
            flash('The preferences for the block have been updated.', 'success')
        return redirect(dashboard_url(context, block))

    return render_template(
        'blocks/edit.html',
        tree=context.tree,
        block=block,
        title=module.get_title(),
        form_fields=module.config_form(context, block.id),
        cancel_url=dashboard_url(context, block),
    )
