"""
Speedboat API schemas for the stored records and incoming requests
"""

from typing import Optional

import pydantic


__all__ = [
    "SpeedboatID",
    "Speedboat",
    "SpeedboatCreation",
    "SpeedboatPatch",
    "SpeedboatCreationBody",
    "SpeedboatPatchBody"
]


SpeedboatID = pydantic.conint(ge=0, le=2 ** 63 - 1)
"""Every value that a stored speedboat ID may take (the range of a signed 64-bit integer)"""


class _SpeedboatFields(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(protected_namespaces=())

    brand: Optional[str] = None
    model_number: Optional[str] = None
    image_url: Optional[str] = None
    wholesale_price: Optional[float] = None
    retail_price: Optional[float] = None
    in_stock: Optional[bool] = None


class Speedboat(_SpeedboatFields):
    id: SpeedboatID
    model_number: str
    created: pydantic.NonNegativeInt
    modified: pydantic.NonNegativeInt


class SpeedboatCreation(_SpeedboatFields):
    """
    Writable fields of a new speedboat

    The ``model_number`` is optional here on purpose: a missing
    or blank model number is reported by the explicit validation
    with status 422 instead of being rejected as malformed request.
    """


class SpeedboatPatch(_SpeedboatFields):
    """
    Writable fields of an existing speedboat where only explicitly set keys will be applied
    """


class SpeedboatCreationBody(pydantic.BaseModel):
    speedboat: SpeedboatCreation


class SpeedboatPatchBody(pydantic.BaseModel):
    speedboat: SpeedboatPatch
