"""Catalog persistence over a single key-value slot.

The whole catalog is stored as one JSON array. It is read once at startup and
overwritten after every mutation; unreadable contents never prevent startup.
"""

from collections.abc import Sequence
from typing import Final, Protocol

import pydantic
from pydantic import TypeAdapter
from sqlalchemy.exc import SQLAlchemyError

from ...constants import DEFAULT_STORAGE_KEY, WRITE_ATTEMPTS
from ...domain.entities import Product
from ...domain.exceptions import PersistenceReadError, PersistenceWriteError
from ...logging_config import get_logger
from ...logging_utils import log_catalog_operation
from ...metrics import persistence_fallbacks_total, persistence_write_failures_total
from .models import ProductRecord

logger: Final = get_logger(__name__)

_CATALOG_ADAPTER: Final = TypeAdapter(list[ProductRecord])

# Failures raised by the storage backends we ship
STORAGE_ERRORS: Final = (SQLAlchemyError, OSError)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str) -> None: ...


def serialize_catalog(products: Sequence[Product]) -> str:
    """Encode the catalog as a JSON array using the camelCase wire keys."""
    records = [ProductRecord.from_domain(product) for product in products]
    return _CATALOG_ADAPTER.dump_json(
        records, by_alias=True, exclude_none=True
    ).decode("utf-8")


def parse_catalog(raw: str) -> list[Product]:
    """Decode a stored JSON array into products.

    Raises:
        PersistenceReadError: If the payload is malformed or breaks the
            unique id / unique name invariants
    """
    try:
        records = _CATALOG_ADAPTER.validate_json(raw)
    except pydantic.ValidationError as e:
        raise PersistenceReadError(
            f"Stored catalog is malformed ({e.error_count()} errors)"
        ) from e

    products = [record.to_domain() for record in records]

    ids = {product.id for product in products}
    if len(ids) != len(products):
        raise PersistenceReadError("Stored catalog contains duplicate ids")

    names = {product.name.strip().casefold() for product in products}
    if len(names) != len(products):
        raise PersistenceReadError("Stored catalog contains duplicate names")

    return products


class PersistenceGateway:
    """Loads and saves the catalog under a fixed storage key."""

    def __init__(
        self,
        store: KeyValueStore,
        default: Sequence[Product] = (),
        key: str = DEFAULT_STORAGE_KEY,
    ):
        self.store = store
        self.default = tuple(default)
        self.key = key

    def _fallback(self, reason: str) -> list[Product]:
        persistence_fallbacks_total.add(1, {"reason": reason})
        return list(self.default)

    def load(self) -> list[Product]:
        """Return the stored catalog, or the default catalog if it can't be read."""
        try:
            raw = self.store.get(self.key)
        except STORAGE_ERRORS as e:
            logger.warning(
                "Catalog storage unreadable - using default catalog",
                key=self.key,
                error=str(e),
            )
            return self._fallback("unreadable")

        if raw is None:
            logger.info("No stored catalog - using default catalog", key=self.key)
            return self._fallback("missing")

        try:
            products = parse_catalog(raw)
        except PersistenceReadError as e:
            logger.warning(
                "Stored catalog rejected - using default catalog",
                key=self.key,
                error=str(e),
            )
            return self._fallback("malformed")

        log_catalog_operation(operation="load", key=self.key, count=len(products))
        return products

    def save(self, products: Sequence[Product]) -> None:
        """Overwrite the stored catalog with the full product sequence.

        Raises:
            PersistenceWriteError: If the write still fails after a retry
        """
        payload = serialize_catalog(products)
        last_error: Exception | None = None

        for attempt in range(1, WRITE_ATTEMPTS + 1):
            try:
                self.store.put(self.key, payload)
            except STORAGE_ERRORS as e:
                last_error = e
                logger.warning(
                    "Catalog write failed",
                    key=self.key,
                    attempt=attempt,
                    error=str(e),
                )
                continue

            log_catalog_operation(operation="save", key=self.key, count=len(products))
            return

        persistence_write_failures_total.add(1)
        log_catalog_operation(operation="save", success=False, key=self.key)
        raise PersistenceWriteError(
            f"Could not write catalog to '{self.key}' after {WRITE_ATTEMPTS} attempts"
        ) from last_error
