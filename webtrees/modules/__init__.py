"""
Block modules available on dashboards
"""

from .abstract_module import AbstractModule, BlockModule
from .charts_block import ChartsBlockModule


BLOCK_MODULES = {
    'charts': ChartsBlockModule,
}


def get_block_module(module_name: str, db_session=None) -> BlockModule | None:
    """Instantiate the block module registered under this name"""
    module_class = BLOCK_MODULES.get(module_name)
    if module_class is None:
        return None
    return module_class(db_session=db_session)


__all__ = [
    'AbstractModule',
    'BLOCK_MODULES',
    'BlockModule',
    'ChartsBlockModule',
    'get_block_module',
]
