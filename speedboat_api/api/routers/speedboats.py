"""
Speedboat API router module for /api/speedboats requests
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from ..dependency import LocalRequestData
from .. import helpers
from ...misc import validation
from ...persistence import models
from ... import schemas


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/speedboats",
    tags=["Speedboats"]
)


@router.get(
    "",
    response_model=List[schemas.Speedboat]
)
async def get_all_speedboats(local: LocalRequestData = Depends(LocalRequestData)):
    """
    Return a list of all speedboats (an empty list if there are none).
    """

    return [obj.schema for obj in await helpers.return_all(models.Speedboat, local.session)]


@router.get(
    "/{speedboat_id}",
    response_model=schemas.Speedboat,
    responses={404: {"model": schemas.APIError}}
)
async def get_speedboat_by_id(
        speedboat_id: schemas.SpeedboatID,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Return the speedboat model of a specific speedboat ID.

    A 404 error will be returned in case the speedboat ID is unknown.
    """

    return (await helpers.return_one(speedboat_id, models.Speedboat, local.session)).schema


@router.post(
    "",
    status_code=201,
    response_model=schemas.Speedboat,
    responses={400: {"model": schemas.APIError}, 422: {"model": schemas.FieldErrors}}
)
async def create_new_speedboat(
        body: schemas.SpeedboatCreationBody,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Create a new speedboat.

    The `Location` header of the response points to the newly created speedboat.
    A 422 error will be returned if the `model_number` is missing or blank.
    """

    obj = await helpers.create_new_of_model(
        models.Speedboat,
        body.speedboat.model_dump(),
        local,
        logger,
        validation.validate_speedboat
    )
    local.response.headers["Location"] = str(local.request.url_for("get_speedboat_by_id", speedboat_id=obj.id))
    return obj.schema


async def _update_speedboat(speedboat_id: int, patch: schemas.SpeedboatPatch, local: LocalRequestData) -> Response:
    await helpers.update_one_of_model(
        speedboat_id,
        models.Speedboat,
        patch.model_dump(exclude_unset=True),
        local,
        logger,
        validation.validate_speedboat
    )
    return Response(status_code=204)


@router.patch(
    "/{speedboat_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": schemas.APIError}, 422: {"model": schemas.FieldErrors}}
)
async def update_existing_speedboat(
        speedboat_id: schemas.SpeedboatID,
        body: schemas.SpeedboatPatchBody,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Update the given fields of an existing speedboat, leaving all others untouched.

    A 404 error will be returned if the speedboat ID is unknown.
    A 422 error will be returned if the resulting speedboat is invalid.
    """

    return await _update_speedboat(speedboat_id, body.speedboat, local)


@router.put(
    "/{speedboat_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": schemas.APIError}, 422: {"model": schemas.FieldErrors}}
)
async def replace_existing_speedboat(
        speedboat_id: schemas.SpeedboatID,
        body: schemas.SpeedboatPatchBody,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Update an existing speedboat, behaving exactly like `PATCH`.
    """

    return await _update_speedboat(speedboat_id, body.speedboat, local)


@router.delete(
    "/{speedboat_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": schemas.APIError}}
)
async def delete_existing_speedboat(
        speedboat_id: schemas.SpeedboatID,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Delete an existing speedboat.

    A 404 error will be returned if the speedboat ID is unknown.
    """

    return await helpers.delete_one_of_model(speedboat_id, models.Speedboat, local, logger)
