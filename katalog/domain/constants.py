"""Domain business rules and constants."""

from typing import Final

# Name bounds (trimmed length)
MIN_NAME_LENGTH: Final = 3
MAX_NAME_LENGTH_SIMPLE: Final = 50
MAX_NAME_LENGTH_EXTENDED: Final = 100

# Description bounds (trimmed length)
MAX_DESCRIPTION_LENGTH: Final = 200
MIN_DESCRIPTION_LENGTH_EXTENDED: Final = 20

# Extended attributes
CATEGORY_OPTIONS: Final = (
    "Makanan",
    "Minuman",
    "Sembako",
    "Kebersihan",
    "Elektronik",
    "Lainnya",
)
MIN_STOCK: Final = 0
