"""Default catalogs used when durable storage is empty or unreadable."""

from datetime import date
from typing import Final

from ...domain.entities import Product, ValidationPolicy

SIMPLE_SEED: Final = (
    Product(id=1, name="Makanan", description="Produk makanan siap saji"),
    Product(id=2, name="Minuman", description="Aneka minuman dingin & hangat"),
)

EXTENDED_SEED: Final = (
    Product(
        id=1,
        name="Beras Premium 5kg",
        description="Beras putih pulen kualitas premium kemasan 5kg",
        price=72500.0,
        category="Sembako",
        release_date=date(2024, 1, 15),
        stock=40,
        is_active=True,
    ),
    Product(
        id=2,
        name="Teh Melati",
        description="Teh celup aroma melati isi 25 kantong",
        price=8500.0,
        category="Minuman",
        release_date=date(2024, 3, 2),
        stock=120,
        is_active=True,
    ),
    Product(
        id=3,
        name="Sabun Cuci Piring",
        description="Sabun cuci piring jeruk nipis isi ulang 750ml",
        price=14000.0,
        category="Kebersihan",
        release_date=date(2023, 11, 20),
        stock=0,
        is_active=False,
    ),
)


def seed_catalog(policy: ValidationPolicy) -> list[Product]:
    """Return a fresh copy of the seed catalog for a variant."""
    return list(EXTENDED_SEED if policy.extended else SIMPLE_SEED)
