"""
Base classes for modules that provide dashboard blocks
"""

from abc import ABC, abstractmethod

from webtrees.database import db
from webtrees.repositories.block_repository import BlockRepository
from webtrees.shared.logging_config import get_project_logger


class AbstractModule:
    """A named module with access to its blocks' persisted settings"""

    def __init__(self, name: str, db_session=None):
        self.name = name
        self.db_session = db_session or db.session
        self.block_repository = BlockRepository(self.db_session)
        self.logger = get_project_logger(self.__class__.__module__)

    def get_name(self) -> str:
        return self.name

    def get_title(self) -> str:
        return self.name

    def get_description(self) -> str:
        return ''

    def get_block_setting(self, block_id: int, setting_name: str, default: str | None = None) -> str | None:
        return self.block_repository.get_setting(block_id, setting_name, default)

    def set_block_setting(self, block_id: int, setting_name: str, setting_value: str | None) -> None:
        """Persist a setting immediately; the last write wins"""
        self.block_repository.set_setting(block_id, setting_name, setting_value)
        self.db_session.commit()


class BlockModule(AbstractModule, ABC):
    """A module that renders blocks on tree or user dashboards"""

    @abstractmethod
    def get_block(self, context, block_id: int, template: bool = True, cfg: dict | None = None) -> str:
        """HTML of the block, wrapped in the block template unless template is False"""

    @abstractmethod
    def configure_block(self, context, block_id: int, form) -> bool:
        """Save submitted settings; returns whether anything was saved"""

    @abstractmethod
    def config_form(self, context, block_id: int) -> str:
        """HTML form fields for the block settings"""

    def load_ajax(self) -> bool:
        return False

    def is_user_block(self) -> bool:
        return False

    def is_gedcom_block(self) -> bool:
        return False
