"""
Repository for dashboard blocks and their settings
"""

from webtrees.database import db
from webtrees.database.models import Block, BlockSetting
from webtrees.repositories.base_repository import BaseRepository


class BlockRepository(BaseRepository):
    """Blocks and (block_id, setting_name) -> value settings"""

    def get_block(self, block_id: int) -> Block | None:
        return self.safe_query(lambda: self.db_session.get(Block, block_id), f"get block {block_id}")

    def get_tree_blocks(self, tree_id: int) -> list[Block]:
        """Blocks of a tree dashboard, in display order"""
        def _get_tree_blocks():
            return self.db_session.execute(
                db.select(Block)
                .where(Block.tree_id == tree_id, Block.user_id.is_(None))
                .order_by(Block.location, Block.block_order, Block.id)
            ).scalars().all()

        return self.safe_query(_get_tree_blocks, f"get blocks of tree {tree_id}")

    def get_user_blocks(self, user_id: int) -> list[Block]:
        """Blocks of a user's own page, in display order"""
        def _get_user_blocks():
            return self.db_session.execute(
                db.select(Block)
                .where(Block.user_id == user_id)
                .order_by(Block.location, Block.block_order, Block.id)
            ).scalars().all()

        return self.safe_query(_get_user_blocks, f"get blocks of user {user_id}")

    def create_block(self, module_name: str, tree_id: int | None = None, user_id: int | None = None,
                     location: str = 'main', block_order: int = 0) -> Block:
        def _create_block():
            block = Block(
                module_name=module_name,
                tree_id=tree_id,
                user_id=user_id,
                location=location,
                block_order=block_order,
            )
            self.db_session.add(block)
            return block

        return self.safe_operation(_create_block, f"create {module_name} block")

    def get_setting(self, block_id: int, setting_name: str, default: str | None = None) -> str | None:
        def _get_setting():
            setting = self.db_session.get(BlockSetting, {'block_id': block_id, 'setting_name': setting_name})
            return setting.setting_value if setting is not None else default

        return self.safe_query(_get_setting, f"get block {block_id} setting {setting_name}")

    def set_setting(self, block_id: int, setting_name: str, setting_value: str | None) -> None:
        """Store a setting, overwriting any previous value; None deletes it"""
        def _set_setting():
            setting = self.db_session.get(BlockSetting, {'block_id': block_id, 'setting_name': setting_name})
            if setting_value is None:
                if setting is not None:
                    self.db_session.delete(setting)
            elif setting is None:
                self.db_session.add(BlockSetting(
                    block_id=block_id,
                    setting_name=setting_name,
                    setting_value=setting_value,
                ))
            else:
                setting.setting_value = setting_value

        self.safe_operation(_set_setting, f"set block {block_id} setting {setting_name}")
