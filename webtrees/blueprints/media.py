"""
Media blueprint: list and view media objects
"""

from flask import Blueprint, abort, render_template

from webtrees.blueprints.blueprint_utils import build_context
from webtrees.services.exceptions import NotFoundError, PermissionDeniedError
from webtrees.services.media_service import MediaService
from webtrees.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

media = Blueprint('media', __name__, url_prefix='/tree')


@media.route('/<tree_name>/media')
def media_list(tree_name):
    """Media objects of a tree visible to the viewer"""
    context = build_context(tree_name)
    media_service = MediaService()
    items = [
        media_service.describe(item, context.access_level)
        for item in media_service.list_visible_media(context)
    ]
    return render_template('media/list.html', tree=context.tree, items=items)


@media.route('/<tree_name>/media/<xref>')
def media_detail(tree_name, xref):
    """Names, files and note of one media object"""
    context = build_context(tree_name)
    media_service = MediaService()
    try:
        item = media_service.get_visible_media(context, xref)
    except NotFoundError:
        abort(404)
    except PermissionDeniedError:
        logger.info(f"Denied media object {xref} in tree {tree_name}")
        abort(403)

    details = media_service.describe(item, context.access_level)
    return render_template('media/detail.html', tree=context.tree, item=details)
