"""Infrastructure and technical constants."""

from typing import Final

# Technical configuration constants
DEFAULT_DATABASE_URL: Final = "sqlite:///./katalog.db"
DEFAULT_STORAGE_KEY: Final = "products"
DEFAULT_NOTIFICATION_DURATION_MS: Final = 3000
WRITE_ATTEMPTS: Final = 2
