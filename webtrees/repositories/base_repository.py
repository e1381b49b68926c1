"""
Base repository class shared by all webtrees repositories
"""

from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from webtrees.database import db
from webtrees.shared.logging_config import get_project_logger


class BaseRepository:
    """
    Base repository class providing common functionality for all repositories

    Writes go through safe_operation(), which flushes and rolls back on failure;
    reads go through safe_query(). Committing is left to the caller.
    """

    def __init__(self, db_session=None):
        self.db_session = db_session or db.session
        self.logger = get_project_logger(self.__class__.__name__)

    def safe_operation(self, operation: Callable[[], Any], operation_name: str = "operation") -> Any:
        """
        Execute a write with standard error handling

        Args:
            operation: Function to execute (should return result)
            operation_name: Description for logging purposes

        Returns:
            Result of the operation

        Raises:
            SQLAlchemyError: Re-raised after logging and rollback
        """
        try:
            result = operation()
            self.db_session.flush()
            self.logger.debug(f"Repository {operation_name} completed successfully")
            return result
        except SQLAlchemyError as e:
            self.db_session.rollback()
            self.logger.error(f"Database error in {operation_name}: {e}")
            raise

    def safe_query(self, query_func: Callable[[], Any], operation_name: str = "query") -> Any:
        """
        Execute a read-only query with error logging (no flush needed)

        Args:
            query_func: Function to execute query
            operation_name: Description for logging purposes

        Returns:
            Query result
        """
        try:
            result = query_func()
            self.logger.debug(f"Repository {operation_name} completed successfully")
            return result
        except SQLAlchemyError as e:
            self.logger.error(f"Repository {operation_name} failed: {e}")
            raise
