"""Field validation rules for product drafts.

Pure domain validation without logging or external dependencies. Every rule
takes a raw draft value (as typed into a form, or already parsed) and returns
an error message, or ``None`` when the value is acceptable.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from . import messages
from .constants import CATEGORY_OPTIONS, MIN_STOCK
from .entities import SIMPLE_POLICY, Product, ValidationPolicy

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_price(value: Any) -> float:
    """Parse a price from a number or numeric string.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError("Price must be a number")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, OverflowError) as e:
        raise ValueError("Price must be a number") from e
    if not math.isfinite(number):
        raise ValueError("Price must be finite")
    return number


def parse_stock(value: Any) -> int:
    """Parse a stock count from an integer, integral float or digit string.

    Raises:
        ValueError: If the value is not a whole number
    """
    if isinstance(value, bool):
        raise ValueError("Stock must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Stock must be an integer")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError("Stock must be an integer")


def parse_release_date(value: Any) -> date:
    """Parse a release date, dropping any time of day.

    Raises:
        ValueError: If the value is not a date, datetime or ISO 8601 string
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip()).date()
    raise ValueError("Release date must be a date")


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def validate_name(
    value: Any,
    catalog: Iterable[Product],
    editing_id: int | None,
    policy: ValidationPolicy = SIMPLE_POLICY,
) -> str | None:
    name = _text(value)
    if not name:
        return messages.NAME_REQUIRED
    if len(name) < policy.min_name_length:
        return messages.name_too_short(policy.min_name_length)
    if len(name) > policy.max_name_length:
        return messages.name_too_long(policy.max_name_length)
    # The record being edited may keep its own name
    if any(p.id != editing_id and p.has_name(name) for p in catalog):
        return messages.NAME_DUPLICATE
    return None


def validate_description(
    value: Any, policy: ValidationPolicy = SIMPLE_POLICY
) -> str | None:
    description = _text(value)
    if (
        policy.min_description_length is not None
        and len(description) < policy.min_description_length
    ):
        return messages.DESCRIPTION_TOO_SHORT
    if (
        policy.max_description_length is not None
        and len(description) > policy.max_description_length
    ):
        return messages.DESCRIPTION_TOO_LONG
    return None


def validate_price(value: Any) -> str | None:
    if _is_missing(value):
        return messages.PRICE_REQUIRED
    try:
        price = parse_price(value)
    except ValueError:
        return messages.PRICE_NOT_A_NUMBER
    if price <= 0:
        return messages.PRICE_NOT_POSITIVE
    return None


def validate_category(value: Any) -> str | None:
    if _is_missing(value):
        return messages.CATEGORY_REQUIRED
    if _text(value) not in CATEGORY_OPTIONS:
        return messages.CATEGORY_INVALID
    return None


def validate_release_date(value: Any, today: date) -> str | None:
    if _is_missing(value):
        return messages.RELEASE_DATE_REQUIRED
    try:
        release_date = parse_release_date(value)
    except ValueError:
        return messages.RELEASE_DATE_INVALID
    if release_date > today:
        return messages.RELEASE_DATE_IN_FUTURE
    return None


def validate_stock(value: Any) -> str | None:
    if _is_missing(value):
        return messages.STOCK_REQUIRED
    try:
        stock = parse_stock(value)
    except ValueError:
        return messages.STOCK_NOT_AN_INTEGER
    if stock < MIN_STOCK:
        return messages.STOCK_NEGATIVE
    return None


def validate(
    draft: Mapping[str, Any],
    catalog: Iterable[Product],
    editing_id: int | None = None,
    *,
    policy: ValidationPolicy = SIMPLE_POLICY,
    today: date | None = None,
) -> dict[str, str]:
    """Validate a draft against the current catalog.

    Args:
        draft: Field name -> raw value
        catalog: Snapshot of the catalog at validation time
        editing_id: Id of the record being edited, None when creating
        policy: Field set and bounds of the active variant
        today: Reference date for the release date rule (defaults to today)

    Returns:
        Field name -> error message; empty when the draft can be committed
    """
    today = today or date.today()
    checks: dict[str, str | None] = {
        "name": validate_name(draft.get("name"), catalog, editing_id, policy),
        "description": validate_description(draft.get("description"), policy),
    }
    if policy.extended:
        checks.update(
            price=validate_price(draft.get("price")),
            category=validate_category(draft.get("category")),
            release_date=validate_release_date(draft.get("release_date"), today),
            stock=validate_stock(draft.get("stock")),
        )
    return {field: error for field, error in checks.items() if error is not None}


def normalize_draft(
    draft: Mapping[str, Any], policy: ValidationPolicy = SIMPLE_POLICY
) -> dict[str, Any]:
    """Convert a validated draft into the field values stored on a Product."""
    values: dict[str, Any] = {
        "name": _text(draft.get("name")),
        "description": _text(draft.get("description")),
    }
    if policy.extended:
        values.update(
            price=parse_price(draft.get("price")),
            category=_text(draft.get("category")),
            release_date=parse_release_date(draft.get("release_date")),
            stock=parse_stock(draft.get("stock")),
            is_active=parse_bool(draft.get("is_active", True)),
        )
    return values
