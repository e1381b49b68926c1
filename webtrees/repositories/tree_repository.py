"""
Repository for trees, their preferences and users
"""

from webtrees.database import db
from webtrees.database.models import Tree, TreeSetting, User, UserTreeSetting
from webtrees.repositories.base_repository import BaseRepository


class TreeRepository(BaseRepository):
    """Trees, tree preferences and per-tree user settings"""

    def get_by_name(self, name: str) -> Tree | None:
        return self.safe_query(
            lambda: self.db_session.execute(
                db.select(Tree).where(Tree.name == name)
            ).scalar_one_or_none(),
            f"get tree {name}"
        )

    def get_all(self) -> list[Tree]:
        return self.safe_query(
            lambda: self.db_session.execute(db.select(Tree).order_by(Tree.title, Tree.name)).scalars().all(),
            "get all trees"
        )

    def create_tree(self, name: str, title: str = '') -> Tree:
        def _create_tree():
            tree = Tree(name=name, title=title or name)
            self.db_session.add(tree)
            return tree

        return self.safe_operation(_create_tree, f"create tree {name}")

    def set_preference(self, tree: Tree, setting_name: str, setting_value: str) -> None:
        def _set_preference():
            setting = self.db_session.get(TreeSetting, {'tree_id': tree.id, 'setting_name': setting_name})
            if setting is None:
                self.db_session.add(TreeSetting(
                    tree_id=tree.id,
                    setting_name=setting_name,
                    setting_value=setting_value,
                ))
            else:
                setting.setting_value = setting_value

        self.safe_operation(_set_preference, f"set {tree.name} preference {setting_name}")

    def get_user(self, user_id: int) -> User | None:
        return self.safe_query(lambda: self.db_session.get(User, user_id), f"get user {user_id}")

    def set_user_preference(self, tree: Tree, user: User, setting_name: str, setting_value: str) -> None:
        def _set_user_preference():
            setting = self.db_session.get(UserTreeSetting, {
                'user_id': user.id,
                'tree_id': tree.id,
                'setting_name': setting_name,
            })
            if setting is None:
                self.db_session.add(UserTreeSetting(
                    user_id=user.id,
                    tree_id=tree.id,
                    setting_name=setting_name,
                    setting_value=setting_value,
                ))
            else:
                setting.setting_value = setting_value

        self.safe_operation(_set_user_preference, f"set {user.user_name} preference {setting_name}")
