"""In-memory catalog with write-through persistence."""

from collections.abc import Callable, Mapping
from typing import Any, Final

from ..domain.entities import Product
from ..infrastructure.storage.gateway import PersistenceGateway
from ..logging_config import get_logger
from ..logging_utils import log_catalog_operation
from ..metrics import (
    products_created_total,
    products_deleted_total,
    products_updated_total,
)
from ..utils import MonotonicIdGenerator

logger: Final = get_logger(__name__)


class CatalogStore:
    """Owns the ordered product sequence, newest first.

    Mutators do not validate: callers validate against ``all()`` immediately
    before committing. Each successful mutation is saved before it becomes
    visible, so memory never runs ahead of durable storage.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        id_generator: Callable[[], int] | None = None,
    ):
        self.gateway = gateway
        self._products: tuple[Product, ...] = tuple(gateway.load())
        highest_id = max((p.id for p in self._products), default=0)
        self._next_id = id_generator or MonotonicIdGenerator(floor=highest_id)
        logger.debug("Catalog loaded", count=len(self._products))

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> tuple[Product, ...]:
        return self._products

    def get(self, product_id: int) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def _commit(self, products: tuple[Product, ...]) -> None:
        self.gateway.save(products)
        self._products = products

    def create(self, fields: Mapping[str, Any]) -> Product:
        """Prepend a new product with a fresh id."""
        product = Product(id=self._next_id(), **fields)
        self._commit((product, *self._products))

        products_created_total.add(1)
        log_catalog_operation(
            operation="create", product_id=product.id, product_name=product.name
        )
        return product

    def update(self, product_id: int, fields: Mapping[str, Any]) -> Product | None:
        """Replace every field of a product except its id.

        Returns:
            The new record, or None if no product has that id
        """
        if self.get(product_id) is None:
            logger.warning("Product update skipped - not found", product_id=product_id)
            return None

        product = Product(id=product_id, **fields)
        self._commit(
            tuple(product if p.id == product_id else p for p in self._products)
        )

        products_updated_total.add(1)
        log_catalog_operation(
            operation="update", product_id=product.id, product_name=product.name
        )
        return product

    def delete(self, product_id: int) -> bool:
        """Remove a product.

        Returns:
            True if a product was removed, False if not found
        """
        if self.get(product_id) is None:
            logger.warning("Product deletion skipped - not found", product_id=product_id)
            return False

        self._commit(tuple(p for p in self._products if p.id != product_id))

        products_deleted_total.add(1)
        log_catalog_operation(operation="delete", product_id=product_id)
        return True
