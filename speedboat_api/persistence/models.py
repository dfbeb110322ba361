"""
Speedboat API database models
"""

from typing import Any, Dict

from sqlalchemy import BigInteger, Boolean, Column, DateTime, FetchedValue, Float, Integer, Text
from sqlalchemy.sql import func

from .database import Base
from .. import schemas


class Speedboat(Base):
    """
    Model representing one speedboat offered by the shop
    """

    __tablename__ = "speedboats"

    FIELDS = ("brand", "model_number", "image_url", "wholesale_price", "retail_price", "in_stock")
    """Attributes which may be written by clients (everything else is managed by the server)"""

    # sqlite only auto-increments plain INTEGER primary keys
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        nullable=False,
        primary_key=True,
        autoincrement=True,
        unique=True
    )
    brand = Column(Text, nullable=True)
    model_number = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    wholesale_price = Column(Float, nullable=True)
    retail_price = Column(Float, nullable=True)
    in_stock = Column(Boolean, nullable=True)
    created = Column(DateTime, server_default=func.now())
    modified = Column(DateTime, server_onupdate=FetchedValue(), server_default=func.now(), onupdate=func.now())

    @property
    def values(self) -> Dict[str, Any]:
        """
        Current values of all client-writable attributes
        """

        return {field: getattr(self, field) for field in self.FIELDS}

    @property
    def schema(self) -> schemas.Speedboat:
        """
        Pydantic schema representation of the database model that can be sent to clients
        """

        return schemas.Speedboat(
            id=self.id,
            brand=self.brand,
            model_number=self.model_number,
            image_url=self.image_url,
            wholesale_price=self.wholesale_price,
            retail_price=self.retail_price,
            in_stock=self.in_stock,
            created=int(self.created.timestamp()),
            modified=int(self.modified.timestamp())
        )

    def __repr__(self) -> str:
        return f"Speedboat(id={self.id}, brand={self.brand!r}, model_number={self.model_number!r})"
