"""
Helpers shared by the tree, block and media blueprints
"""

from flask import abort, url_for

from webtrees.modules import BlockModule, get_block_module
from webtrees.repositories.block_repository import BlockRepository
from webtrees.repositories.tree_repository import TreeRepository
from webtrees.services.request_context import RequestContext
from webtrees.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)


def build_context(tree_name: str) -> RequestContext:
    """Viewing context for a tree named in the URL; 404 when there is no such tree"""
    tree = TreeRepository().get_by_name(tree_name)
    if tree is None:
        abort(404)
    return RequestContext.for_request(tree)


def load_block_or_404(context: RequestContext, block_id: int):
    """A block of this tree's dashboard or of the viewer's own page, with its module"""
    block = BlockRepository().get_block(block_id)
    if block is None:
        abort(404)

    if block.context_type == 'gedcom':
        if block.tree_id != context.tree.id:
            abort(404)
    elif not context.is_signed_in or block.user_id != context.user.id:
        abort(404)

    module = get_block_module(block.module_name)
    if module is None:
        logger.warning(f"Block {block_id} uses unknown module {block.module_name!r}")
        abort(404)

    return block, module


def dashboard_url(context: RequestContext, block) -> str:
    if block.context_type == 'user':
        return url_for('tree.my_page', tree_name=context.tree.name)
    return url_for('tree.dashboard', tree_name=context.tree.name)


def render_blocks(context: RequestContext, blocks) -> list[dict]:
    """Render dashboard blocks; blocks that load by AJAX become placeholders"""
    rendered = []
    for block in blocks:
        module = get_block_module(block.module_name)
        if module is None:
            logger.warning(f"Skipping block {block.id}: unknown module {block.module_name!r}")
            continue
        if not _module_supports(module, block):
            logger.debug(f"Skipping block {block.id}: {block.module_name} not available here")
            continue

        entry = {'block': block, 'location': block.location, 'html': None, 'ajax_url': None}
        if module.load_ajax():
            entry['ajax_url'] = url_for('blocks.show', tree_name=context.tree.name, block_id=block.id)
        else:
            entry['html'] = module.get_block(context, block.id)
        rendered.append(entry)
    return rendered


def _module_supports(module: BlockModule, block) -> bool:
    if block.context_type == 'user':
        return module.is_user_block()
    return module.is_gedcom_block()
