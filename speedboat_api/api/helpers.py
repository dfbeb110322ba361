"""
Generic helper library for the REST API, mostly wrapping the persistence layer
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

import pydantic
import sqlalchemy.orm
from fastapi.responses import Response

from .base import NotFound, UnprocessableEntity
from .dependency import LocalRequestData
from ..persistence import models
from ..misc.logger import enforce_logger


Validator = Callable[[Mapping[str, Any]], Dict[str, List[str]]]


def _check(values: Mapping[str, Any], validator: Optional[Validator]):
    if validator is None:
        return
    errors = validator(values)
    if errors:
        raise UnprocessableEntity(errors)


async def return_one(
        object_id: int,
        model: Type[models.Base],
        session: sqlalchemy.orm.Session
) -> models.Base:
    """
    Return the object of a given model that's identified by its object ID

    :param object_id: internal ID (primary key in the database) of the model
    :param model: class of a SQLAlchemy model
    :param session: database session which should be used to perform the query
    :return: resulting entity as SQLAlchemy model
    :raises NotFound: when the specified object ID returned no result
    """

    obj = session.get(model, object_id)
    if obj is None:
        raise NotFound(f"{model.__name__} with ID {object_id!r}")
    return obj


async def return_all(
        model: Type[models.Base],
        session: sqlalchemy.orm.Session
) -> List[models.Base]:
    """
    Return all objects of a given model, ordered by their object ID
    """

    return session.query(model).order_by(model.id).all()


async def create_new_of_model(
        model: Type[models.Base],
        values: Dict[str, Any],
        local: LocalRequestData,
        logger: Optional[logging.Logger] = None,
        validator: Optional[Validator] = None
) -> models.Base:
    """
    Validate the given values and persist them as new instance of the model

    :param model: class of the SQLAlchemy model
    :param values: attributes of the new instance
    :param local: contextual local data
    :param logger: optional logger that should be used for DEBUG messages
    :param validator: optional function returning a mapping of field errors
    :return: newly created entity as SQLAlchemy model
    :raises UnprocessableEntity: when the validator rejected the values
    """

    _check(values, validator)
    obj = model(**values)
    local.session.add(obj)
    local.session.commit()
    local.session.refresh(obj)
    enforce_logger(logger).debug(f"Created new model {obj!r}")
    return obj


async def update_one_of_model(
        instance_id: pydantic.NonNegativeInt,
        model: Type[models.Base],
        changes: Dict[str, Any],
        local: LocalRequestData,
        logger: Optional[logging.Logger] = None,
        validator: Optional[Validator] = None
) -> models.Base:
    """
    Apply the given changes to the identified instance of a model

    Only the keys present in the ``changes`` are touched. The validator
    receives the stored values merged with the changes, so that the
    resulting record is checked as a whole. Nothing will be written if
    the validation fails.

    :param instance_id: unique identifier of the instance to be updated
    :param model: class of the SQLAlchemy model
    :param changes: mapping of attribute names to their new values
    :param local: contextual local data
    :param logger: optional logger that should be used for DEBUG messages
    :param validator: optional function returning a mapping of field errors
    :return: updated entity as SQLAlchemy model
    :raises NotFound: when the specified ID can't be found for the given model
    :raises UnprocessableEntity: when the validator rejected the merged values
    """

    obj = await return_one(instance_id, model, local.session)
    _check({**obj.values, **changes}, validator)
    for key, value in changes.items():
        setattr(obj, key, value)
    local.session.add(obj)
    local.session.commit()
    enforce_logger(logger).debug(f"Updated model {obj!r} with {changes!r}")
    return obj


async def delete_one_of_model(
        instance_id: pydantic.NonNegativeInt,
        model: Type[models.Base],
        local: LocalRequestData,
        logger: Optional[logging.Logger] = None
) -> Response:
    """
    Delete the identified instance of a model from the database

    :param instance_id: unique identifier of the instance to be deleted
    :param model: class of the SQLAlchemy model
    :param local: contextual local data
    :param logger: optional logger that should be used for DEBUG messages
    :return: empty response with status code 204
    :raises NotFound: when the specified ID can't be found for the given model
    """

    obj = await return_one(instance_id, model, local.session)
    enforce_logger(logger).debug(f"Deleting model {obj!r}...")
    local.session.delete(obj)
    local.session.commit()
    return Response(status_code=204)
