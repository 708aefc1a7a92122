"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Final

from .constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH_EXTENDED,
    MAX_NAME_LENGTH_SIMPLE,
    MIN_DESCRIPTION_LENGTH_EXTENDED,
    MIN_NAME_LENGTH,
)

SIMPLE_FIELDS: Final = ("name", "description")
EXTENDED_FIELDS: Final = (
    "name",
    "description",
    "price",
    "category",
    "release_date",
    "stock",
    "is_active",
)


@dataclass(frozen=True)
class Product:
    """A catalog record. Never mutated in place; updates replace the whole record."""

    id: int
    name: str
    description: str = ""
    price: float | None = None
    category: str | None = None
    release_date: date | None = None
    stock: int | None = None
    is_active: bool | None = None

    def has_name(self, name: str) -> bool:
        """Case-insensitive name comparison against a trimmed candidate."""
        return self.name.strip().casefold() == name.strip().casefold()

    def field_values(self) -> dict[str, Any]:
        """All fields except the id, as used to populate a form draft."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "id"}


@dataclass(frozen=True)
class ValidationPolicy:
    """Field set and bounds for one catalog variant."""

    variant: str
    min_name_length: int
    max_name_length: int
    description_required: bool
    min_description_length: int | None = None
    max_description_length: int | None = None
    extended: bool = False

    @property
    def field_names(self) -> tuple[str, ...]:
        return EXTENDED_FIELDS if self.extended else SIMPLE_FIELDS

    def default_draft(self) -> dict[str, Any]:
        """Values of an empty form in create mode."""
        draft: dict[str, Any] = {"name": "", "description": ""}
        if self.extended:
            draft.update(
                price=None,
                category=None,
                release_date=None,
                stock=0,
                is_active=True,
            )
        return draft

    def draft_from(self, product: Product) -> dict[str, Any]:
        """Form values for editing an existing product."""
        values = product.field_values()
        draft = self.default_draft()
        for name in self.field_names:
            value = values.get(name)
            if value is not None:
                draft[name] = value
        return draft


SIMPLE_POLICY: Final = ValidationPolicy(
    variant="simple",
    min_name_length=MIN_NAME_LENGTH,
    max_name_length=MAX_NAME_LENGTH_SIMPLE,
    description_required=False,
    max_description_length=MAX_DESCRIPTION_LENGTH,
)

EXTENDED_POLICY: Final = ValidationPolicy(
    variant="extended",
    min_name_length=MIN_NAME_LENGTH,
    max_name_length=MAX_NAME_LENGTH_EXTENDED,
    description_required=True,
    min_description_length=MIN_DESCRIPTION_LENGTH_EXTENDED,
    extended=True,
)


def policy_for(variant: str) -> ValidationPolicy:
    """Return the validation policy for a variant name."""
    if variant == SIMPLE_POLICY.variant:
        return SIMPLE_POLICY
    if variant == EXTENDED_POLICY.variant:
        return EXTENDED_POLICY
    raise ValueError(f"Unknown catalog variant: {variant!r}")
