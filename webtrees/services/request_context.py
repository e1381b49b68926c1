"""
Per-request viewing context passed explicitly to records, modules and charts
"""

from dataclasses import dataclass
from functools import cached_property

from webtrees.database.models import Block, Tree, User
from webtrees.services.auth_service import AuthService


@dataclass
class RequestContext:
    """The tree being viewed and the signed-in user, if any"""
    tree: Tree
    user: User | None = None

    @classmethod
    def for_request(cls, tree: Tree) -> 'RequestContext':
        return cls(tree=tree, user=AuthService().current_user())

    @property
    def is_signed_in(self) -> bool:
        return self.user is not None

    @cached_property
    def access_level(self) -> int:
        return AuthService.access_level(self.tree, self.user)

    @cached_property
    def is_manager(self) -> bool:
        return AuthService.is_manager(self.tree, self.user)

    @property
    def user_gedcomid(self) -> str:
        """Xref of the signed-in user's own individual in this tree"""
        if not self.is_signed_in:
            return ''
        return self.tree.get_user_preference(self.user, 'gedcomid')

    def can_configure_block(self, block: Block | None) -> bool:
        """Managers configure tree dashboards; any signed-in user their own page"""
        if block is None:
            return False
        if block.context_type == 'gedcom':
            return self.is_manager
        return self.is_signed_in
