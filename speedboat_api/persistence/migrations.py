"""
Speedboat API database migrations using alembic
"""

import os
import logging

import alembic.command
import alembic.config


MIGRATIONS_DIRECTORY: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic")

_logger: logging.Logger = logging.getLogger(__name__)


def get_config(database_url: str) -> alembic.config.Config:
    config = alembic.config.Config()
    config.set_main_option("script_location", MIGRATIONS_DIRECTORY)
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def upgrade(database_url: str, revision: str = "head"):
    """
    Apply all outstanding migrations up to the given revision to the database
    """

    _logger.info(f"Upgrading database schema to revision {revision!r}...")
    alembic.command.upgrade(get_config(database_url), revision)
