"""
Speedboat REST API base library
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import schemas


logger = logging.getLogger(__name__)


async def handle_generic_exception(request: Request, _: Exception):
    logger.exception("Unhandled exception caught in base exception handler!")
    status_code = 500
    msg = "Unexpected server error. The requested action wasn't completed successfully."

    return JSONResponse(jsonable_encoder(schemas.APIError(
        status=status_code,
        method=request.method,
        request=request.url.path,
        repeat=False,
        message=msg,
        details=""
    )), status_code=status_code)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """
    Handle requests that couldn't be parsed into the expected schemas

    Problems with single fields of the resource in the request body are
    reported like any other validation failure of a record (422 with the
    field-error mapping). Path parameters that can't be parsed never
    identify an existing record (404). Anything else is a malformed
    request (400), e.g. a missing resource envelope or a non-JSON body.
    """

    errors = exc.errors()
    locations = [tuple(error.get("loc", ())) for error in errors]

    if errors and all(loc and loc[0] == "path" for loc in locations):
        return await APIException.handle(request, NotFound("Resource", str(errors)))

    if errors and all(len(loc) >= 3 and loc[0] == "body" for loc in locations):
        field_errors: Dict[str, List[str]] = {}
        for loc, error in zip(locations, errors):
            field_errors.setdefault(str(loc[2]), []).append(error["msg"])
        return await UnprocessableEntity.handle(request, UnprocessableEntity(field_errors))

    status_code = 400
    msgs = "\n".join(["\t" + error["msg"] for error in errors])
    message = f"Failed to process the request:\n{msgs}"
    logger.debug(f"Malformed request @ '{request.method} {request.url.path}': {errors}")

    return JSONResponse(jsonable_encoder(schemas.APIError(
        status=status_code,
        method=request.method,
        request=request.url.path,
        repeat=False,
        message=message,
        details=str(errors)
    )), status_code=status_code)


class APIException(HTTPException):
    """
    Base class for any kind of generic API exception
    """

    def __init__(
            self,
            status_code: int,
            detail: Any,
            repeat: bool = False,
            message: Optional[str] = None,
            headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.repeat = repeat
        self.message = message

    @classmethod
    async def handle(cls, request: Request, exc: StarletteHTTPException) -> Response:
        """
        Handle exceptions in a generic way to produce APIError models
        """

        status_code = getattr(exc, "status_code", 500)
        repeat = getattr(exc, "repeat", False)
        message = getattr(exc, "message", None) or exc.__class__.__name__

        if not isinstance(exc, StarletteHTTPException):
            logger.error("Invalid exception class for base handler")

        logger.debug(
            f"{type(exc).__name__}: {message} @ '{request.method} "
            f"{request.url.path}' (details: {exc.detail})"
        )
        return JSONResponse(jsonable_encoder(schemas.APIError(
            status=status_code,
            method=request.method,
            request=request.url.path,
            repeat=repeat,
            message=message,
            details=str(exc.detail)
        )), status_code=status_code, headers=getattr(exc, "headers", None))


class NotFound(APIException):
    """
    Exception when a requested resource was not found in the system
    """

    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            status_code=404,
            detail=detail,
            repeat=False,
            message=f"{str(resource)!r} was not found."
        )


class UnprocessableEntity(APIException):
    """
    Exception when the values of a record failed validation

    In contrast to all other API exceptions, the response body is not an
    ``APIError`` model but the bare mapping of invalid field names to
    lists of human-readable error messages, e.g.
    ``{"model_number": ["can't be blank"]}``.
    """

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(
            status_code=422,
            detail=errors,
            repeat=False,
            message="Validation failed: " + ", ".join(errors)
        )
        self.errors = errors

    @classmethod
    async def handle(cls, request: Request, exc: StarletteHTTPException) -> Response:
        errors = getattr(exc, "errors", exc.detail)
        logger.debug(f"Validation failed @ '{request.method} {request.url.path}': {errors}")
        return JSONResponse(jsonable_encoder(errors), status_code=422)
