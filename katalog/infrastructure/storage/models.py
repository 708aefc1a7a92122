from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import Text
from sqlmodel import Column, Field, SQLModel

from ...domain.entities import Product


class StorageSlot(SQLModel, table=True):  # type: ignore[call-arg]
    """A named slot holding one serialized value."""

    __tablename__: str = "storage_slot"  # type: ignore[assignment]

    key: str = Field(primary_key=True, max_length=100)
    value: str = Field(sa_column=Column(Text, nullable=False))


class ProductRecord(BaseModel):
    """Wire shape of one product in the stored JSON array."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    id: int
    name: str
    description: str | None = None
    price: float | None = None
    category: str | None = None
    release_date: date | None = None
    stock: int | None = None
    is_active: bool | None = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductRecord":
        """Convert domain entity to persistence model."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            release_date=product.release_date,
            stock=product.stock,
            is_active=product.is_active,
        )

    def to_domain(self) -> Product:
        """Convert persistence model to domain entity."""
        return Product(
            id=self.id,
            name=self.name,
            description=self.description or "",
            price=self.price,
            category=self.category,
            release_date=self.release_date,
            stock=self.stock,
            is_active=self.is_active,
        )
