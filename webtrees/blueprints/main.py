"""
Main blueprint for web interface
"""

from flask import Blueprint, render_template

from webtrees.repositories.tree_repository import TreeRepository
from webtrees.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

main = Blueprint('main', __name__)


@main.route('/')
def index():
    """List the available trees"""
    trees = TreeRepository().get_all()
    logger.debug(f"Listing {len(trees)} trees")
    return render_template('index.html', trees=trees)
