"""
Speedboat API dependency library
"""

import logging
from typing import Generator

import sqlalchemy.exc
import fastapi.datastructures
from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from ..persistence import database


def get_session() -> Generator[Session, None, bool]:
    """
    Return a generator to handle database sessions gracefully
    """

    logger = logging.getLogger(__name__)
    session = database.get_new_session()

    try:
        yield session
        session.flush()
    except sqlalchemy.exc.DBAPIError as exc:
        details = (exc.statement or "").replace("\n", "")
        logger.exception(f"{type(exc).__name__}: {exc.orig} @ {details!r}")
        session.rollback()
        raise
    except sqlalchemy.exc.SQLAlchemyError as exc:
        logger.exception(f"{type(exc).__name__}: {str(exc)}")
        session.rollback()
        raise
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
    return True


class LocalRequestData:
    """
    Collection of core dependencies used by all path operations

    This class stores references to various important objects that
    will almost certainly be used by request handlers (path operations).
    Note that any dependency added here will be added to the OpenAPI
    definition, if it refers to a Query, Header, Path or Cookie.
    """

    def __init__(
            self,
            request: Request,
            response: Response,
            session: Session = Depends(get_session)
    ):
        self.request: Request = request
        self.response: Response = response
        self.headers: fastapi.datastructures.Headers = request.headers
        self.session: Session = session
