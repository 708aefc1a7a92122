"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when a draft fails validation.

    Carries the full field -> message mapping so callers can surface every
    failing field at once.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Validation failed for: {fields}")


class UnknownFieldError(DomainError):
    """Raised when a form field that the active policy does not define is changed."""

    pass


class PersistenceReadError(DomainError):
    """Raised when the stored catalog cannot be read or parsed."""

    pass


class PersistenceWriteError(DomainError):
    """Raised when the catalog cannot be written to durable storage."""

    pass
