"""
Speedboat API settings provider
"""

import os
import json
from typing import Any, Dict, List, Optional, Tuple, Type

import pydantic_settings
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .schemas import config


CONFIG_PATHS: List[str] = ["config.json", os.path.join("..", "config.json")]
"""
list of search paths for the config file, can be overwritten by the env variable ``CONFIG_PATH``
"""

if os.environ.get("CONFIG_PATH"):
    CONFIG_PATHS = [os.environ.get("CONFIG_PATH")]


def get_db_from_env(db_override: Optional[str] = None) -> Optional[str]:
    if db_override:
        return db_override
    return os.environ.get("DATABASE__CONNECTION", os.environ.get("DATABASE_CONNECTION", None))


class Settings(BaseSettings):
    """
    Speedboat API settings

    Do not change the settings at runtime, since this might lead to unspecified
    behavior. Always restart the server after changing the config file. But note
    that some parts (especially the server config and the database config) might
    get overwritten during initialization (via command-line arguments) or during
    unit testing (where the database URL points to a temporary database).
    """

    model_config = pydantic_settings.SettingsConfigDict(env_nested_delimiter="__", env_file=".env")

    server: config.ServerConfig = config.ServerConfig()
    database: config.DatabaseConfig = config.DatabaseConfig()
    logging: config.LoggingConfig = config.LoggingConfig()

    @classmethod
    def settings_customise_sources(
            cls,
            settings_cls: Type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, dotenv_settings, file_secret_settings, read_settings_from_file


def find_config_file() -> Optional[str]:
    for path in CONFIG_PATHS:
        if os.path.exists(path):
            return path
    return None


def read_settings_from_file() -> Dict[str, Any]:
    path = find_config_file()
    if path is None:
        settings = {}
    else:
        with open(path, "r", encoding="UTF-8") as file:
            settings = json.load(file)

    db = os.environ.get("DATABASE_CONNECTION")
    if db:
        settings.setdefault("database", {})["connection"] = db
    return settings


def get_default_core_config(database_override: Optional[str] = None) -> config.CoreConfig:
    c = config.CoreConfig(
        server=config.ServerConfig(),
        database=config.DatabaseConfig(),
        logging=config.LoggingConfig()
    )
    if database_override:
        c.database.connection = database_override
    return c


def store_configuration(conf: Optional[config.CoreConfig] = None, path: Optional[str] = None) -> config.CoreConfig:
    p = path or os.path.abspath(CONFIG_PATHS[0])
    conf = conf or get_default_core_config(get_db_from_env())
    with open(p, "w") as f:
        json.dump(conf.model_dump(), f, indent=4)
    return conf
