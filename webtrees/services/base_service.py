"""
Base service class providing common functionality for all services
"""
from webtrees.database import db
from webtrees.shared.logging_config import get_project_logger


class BaseService:
    """Base class for all services: a logger and the database session"""

    def __init__(self, db_session=None):
        self.logger = get_project_logger(self.__class__.__module__)
        self.db_session = db_session or db.session
