"""
Speedboat API database bindings and functions using sqlalchemy
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine as _Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool


DEFAULT_DATABASE_URL: str = "sqlite://"
PRINT_SQLITE_WARNING: bool = True

Base = declarative_base()
_engine: Optional[_Engine] = None
_make_session: Optional[sessionmaker] = None
_logger: logging.Logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(database_url: str) -> bool:
    return database_url == "sqlite://" or ":memory:" in database_url


def _get_engine_options(database_url: str) -> Dict[str, Any]:
    if not database_url.startswith("sqlite:"):
        return {}

    if PRINT_SQLITE_WARNING:
        _logger.warning(
            "A sqlite database should only be used for development and testing. "
            "Deploy the speedboat API with a production-grade database server instead."
        )
    options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if _is_in_memory_sqlite(database_url):
        _logger.warning("All speedboats stored in the in-memory sqlite database will be lost on exit.")
        # all sessions share the single connection holding the data
        options["poolclass"] = StaticPool
    return options


def init(database_url: str, echo: bool = True, create_all: bool = True):
    """
    Initialize the database bindings

    Call this function once at program start, before the database is used,
    or the in-memory database at ``DEFAULT_DATABASE_URL`` will be used with a
    warning. Calling it again disposes the previous engine and replaces it,
    which the unit tests do for every single API test case.

    :param database_url: the full URL to connect to the database
    :param echo: whether SQLAlchemy should log all issued statements
    :param create_all: whether all missing tables should be created from the
        metadata directly (leave this to the migrations for real deployments)
    """

    global _engine, _make_session
    if _engine is not None:
        _engine.dispose()

    _engine = create_engine(database_url, echo=echo, **_get_engine_options(database_url))
    if create_all:
        Base.metadata.create_all(bind=_engine)
    _make_session = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def _ensure_initialized():
    if _engine is None or _make_session is None:
        _logger.warning(
            f"Database bindings were not initialized, falling back to {DEFAULT_DATABASE_URL!r}. "
            "Call 'init' once at program startup to use a persistent database."
        )
        init(DEFAULT_DATABASE_URL)


def get_engine() -> _Engine:
    _ensure_initialized()
    return _engine


def get_new_session() -> Session:
    _ensure_initialized()
    return _make_session()
