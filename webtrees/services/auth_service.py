"""
Roles and access levels of the current viewer
"""

from flask import session

from webtrees.database.models import Tree, User
from webtrees.repositories.tree_repository import TreeRepository
from webtrees.shared.logging_config import get_project_logger
from webtrees.shared.privacy import (
    MEMBER_ROLES,
    PRIV_NONE,
    PRIV_PRIVATE,
    PRIV_USER,
    ROLE_ADMIN,
    ROLE_NONE,
)


logger = get_project_logger(__name__)


class AuthService:
    """Who is viewing, and what they may see in a tree"""

    def __init__(self, db_session=None):
        self.tree_repository = TreeRepository(db_session)

    def current_user(self) -> User | None:
        """The signed-in user held in the session, None for visitors"""
        user_id = session.get('user_id')
        if user_id is None:
            return None
        user = self.tree_repository.get_user(user_id)
        if user is None:
            logger.warning(f"Session refers to unknown user {user_id}")
        return user

    @staticmethod
    def is_admin(user: User | None) -> bool:
        return user is not None and bool(user.is_admin)

    @classmethod
    def is_manager(cls, tree: Tree, user: User | None) -> bool:
        if user is None:
            return False
        return cls.is_admin(user) or tree.get_user_preference(user, 'canedit', ROLE_NONE) == ROLE_ADMIN

    @classmethod
    def is_member(cls, tree: Tree, user: User | None) -> bool:
        if user is None:
            return False
        return cls.is_admin(user) or tree.get_user_preference(user, 'canedit', ROLE_NONE) in MEMBER_ROLES

    @classmethod
    def access_level(cls, tree: Tree, user: User | None) -> int:
        if cls.is_manager(tree, user):
            return PRIV_NONE
        if cls.is_member(tree, user):
            return PRIV_USER
        return PRIV_PRIVATE
