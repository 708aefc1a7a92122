"""Create/edit form state machine.

The session is either creating a new product (``editing_id is None``) or
editing an existing one. It validates the draft against the live catalog and
commits in the same call, so no other mutation can slip in between.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any, Final

from ..domain import messages
from ..domain.entities import SIMPLE_POLICY, Product, ValidationPolicy
from ..domain.exceptions import UnknownFieldError, ValidationError
from ..domain.validation import normalize_draft, validate
from ..logging_config import get_logger
from ..logging_utils import log_validation_error
from ..metrics import validation_failures_total
from .catalog_store import CatalogStore
from .notifications import NotificationCenter

logger: Final = get_logger(__name__)


class Mode(StrEnum):
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True)
class DeleteRequest:
    """A deletion awaiting the user's confirmation."""

    product_id: int
    name: str
    prompt: str


class FormSession:
    """Draft values, edit target and field errors of the product form."""

    def __init__(
        self,
        store: CatalogStore,
        notifications: NotificationCenter,
        policy: ValidationPolicy = SIMPLE_POLICY,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.notifications = notifications
        self.policy = policy
        self._today = today

        self.draft: dict[str, Any] = policy.default_draft()
        self.errors: dict[str, str] = {}
        self.editing_id: int | None = None
        self.pending_delete: DeleteRequest | None = None

    @property
    def mode(self) -> Mode:
        return Mode.CREATING if self.editing_id is None else Mode.EDITING

    def reset(self) -> None:
        """Return to create mode with an empty draft."""
        self.draft = self.policy.default_draft()
        self.errors = {}
        self.editing_id = None

    def cancel(self) -> None:
        logger.debug("Form cancelled", editing_id=self.editing_id)
        self.reset()

    def start_edit(self, product: Product) -> None:
        self.draft = self.policy.draft_from(product)
        self.errors = {}
        self.editing_id = product.id
        self.pending_delete = None
        logger.debug("Editing product", product_id=product.id)

    def field_change(self, field: str, value: Any) -> None:
        """Update one draft field and clear only that field's error."""
        if field not in self.policy.field_names:
            raise UnknownFieldError(
                f"Field '{field}' is not part of the {self.policy.variant} form"
            )
        self.draft[field] = value
        self.errors.pop(field, None)

    def _checked_fields(self) -> dict[str, Any]:
        errors = validate(
            self.draft,
            self.store.all(),
            self.editing_id,
            policy=self.policy,
            today=self._today(),
        )
        if errors:
            raise ValidationError(errors)
        return normalize_draft(self.draft, self.policy)

    def submit(self) -> bool:
        """Validate the draft and create or update the product.

        Returns:
            True if the catalog was changed, False if the draft was rejected
        """
        try:
            fields = self._checked_fields()
        except ValidationError as e:
            self.errors = e.errors
            for field, message in e.errors.items():
                log_validation_error(field, self.draft.get(field), message)
            validation_failures_total.add(1, {"mode": self.mode.value})
            self.notifications.danger(messages.CHECK_INPUT)
            return False

        if self.editing_id is None:
            self.store.create(fields)
            self.notifications.success(messages.PRODUCT_ADDED)
        else:
            self.store.update(self.editing_id, fields)
            self.notifications.success(messages.PRODUCT_UPDATED)

        self.reset()
        return True

    def delete_requested(self, product_id: int) -> DeleteRequest | None:
        """First phase of a deletion: ask for confirmation.

        Returns:
            The confirmation request, or None if the product does not exist
        """
        product = self.store.get(product_id)
        if product is None:
            logger.debug("Delete requested for unknown product", product_id=product_id)
            return None

        self.pending_delete = DeleteRequest(
            product_id=product.id,
            name=product.name,
            prompt=messages.confirm_delete_prompt(product.name),
        )
        return self.pending_delete

    def confirm_delete(self, product_id: int, confirmed: bool) -> bool:
        """Second phase of a deletion: apply the user's decision.

        Returns:
            True if the product was deleted
        """
        pending = self.pending_delete
        if pending is None or pending.product_id != product_id:
            logger.debug("Ignoring unrequested delete decision", product_id=product_id)
            return False

        self.pending_delete = None
        if not confirmed:
            logger.debug("Deletion declined", product_id=product_id)
            return False

        if not self.store.delete(product_id):
            return False

        # An edit of the removed record must not outlive it
        if self.editing_id == product_id:
            self.reset()

        self.notifications.success(messages.PRODUCT_DELETED)
        return True
