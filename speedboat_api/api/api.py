"""
Speedboat REST API

This API exposes the speedboat records below `/api/speedboats` with the
five usual operations: list, show, create, update and destroy. Request
and response bodies are JSON-encoded. Requests which create or update a
record wrap the record's fields in an envelope named `speedboat`, e.g.
`{"speedboat": {"brand": "yamaha", "model_number": "S100"}}`.

The following error responses are used by the API:

1. The `400` (Bad Request) error response is returned for malformed
   requests, e.g. a body without the `speedboat` envelope.
2. The `404` (Not Found) error response is returned whenever a record ID
   can't be found.
3. The `422` (Unprocessable Entity) error response is returned when the
   values of a record are invalid. In contrast to all other error responses,
   its body is a mapping of the invalid field names to lists of messages,
   e.g. `{"model_number": ["can't be blank"]}`.
4. The `500` (Internal Server Error) error response may be returned on
   unexpected failures, e.g. when the database is unreachable. No assumptions
   about its body can be made, even though it _should_ use the `APIError` model.

All other error responses use the `APIError` model.
"""

import logging.config
from typing import Any, Callable, Dict, Optional, Union

import fastapi
from fastapi.responses import RedirectResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import base
from .routers import router
from .. import schemas, __version__
from ..persistence import database
from ..settings import Settings


DEFAULT_EXCEPTION_HANDLERS = {
    base.UnprocessableEntity: base.UnprocessableEntity.handle,
    StarletteHTTPException: base.APIException.handle,
    RequestValidationError: base.handle_request_validation_error,
    Exception: base.handle_generic_exception
}


def _make_app(
        title: str,
        version: str,
        description: str,
        exception_handlers: Optional[Dict[Any, Callable]] = None,
        root_redirect: bool = True,
        responses: Optional[Dict[Union[int, str], Dict[str, Any]]] = None,
        **kwargs
) -> fastapi.FastAPI:
    app = fastapi.FastAPI(
        title=title,
        version=version,
        description=description,
        responses=responses or {400: {"model": schemas.APIError}},
        **kwargs
    )

    handlers = exception_handlers or DEFAULT_EXCEPTION_HANDLERS
    for exc in handlers:
        app.add_exception_handler(exc, handlers[exc])

    if root_redirect:
        @app.get("/", include_in_schema=False)
        async def redirect_root():
            return RedirectResponse("./docs")

    return app


def create_app(
        settings: Optional[Settings] = None,
        configure_logging: bool = True,
        configure_database: bool = True,
        create_tables: bool = True
) -> fastapi.FastAPI:
    """
    Create a new ``FastAPI`` instance using the specified settings and switches

    This function is conveniently used to allow overwriting the settings
    before launching the application as well as to allow multiple ``FastAPI``
    instances in one program, which in turn makes unit testing much easier.

    :param settings: optional Settings instance (would be created if not present)
    :param configure_logging: switch whether to configure logging
    :param configure_database: switch whether to configure the database
    :param create_tables: switch whether missing tables should be created without
        migrations (the command-line interface leaves that to alembic)
    :return: new ``FastAPI`` instance
    """

    if settings is None:
        settings = Settings()

    if configure_logging:
        logging.config.dictConfig(settings.logging.model_dump())
    logger = logging.getLogger(__name__)
    logger.debug("Starting application...")

    if configure_database:
        database.init(settings.database.connection, settings.database.debug_sql, create_all=create_tables)

    app = _make_app(
        title="Speedboat REST API",
        version=__version__,
        description=__doc__
    )
    app.include_router(router)
    return app


class APIWrapper:
    """
    Wrapper class around the FastAPI main object, accessible via the ``app`` property

    There should be only one global instance of this object, which should only
    export its functionality to hold the ``app`` property. This wrapper can be
    used to allow easy command-line usage via ``uvicorn`` calls. Example:

    .. code-block::

        uvicorn speedboat_api.api.api:api.app
    """

    def __init__(self):
        self._app: Optional[fastapi.FastAPI] = None

    def get_app(self) -> fastapi.FastAPI:
        return self.app

    def set_app(self, application: fastapi.FastAPI):
        if not isinstance(application, fastapi.FastAPI):
            raise TypeError
        self._app = application

    @property
    def app(self) -> fastapi.FastAPI:
        """
        Return the ``app`` instance (or create it with default settings if it doesn't exist)
        """

        if self._app is not None:
            return self._app
        self._app = create_app()
        return self._app


api = APIWrapper()
