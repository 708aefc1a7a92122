"""Renderer-facing entry points.

A Renderer forwards user events to ``CatalogController`` and redraws from
``CatalogController.state()``. Every call runs to completion before the next
event is handled.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Final

from opentelemetry import trace

from ..application.form_session import DeleteRequest, FormSession
from ..domain.exceptions import PersistenceWriteError
from ..logging_config import get_logger
from ..logging_utils import log_user_action
from .error_handlers import handle_domain_error
from .state import EngineState

logger: Final = get_logger(__name__)
tracer: Final = trace.get_tracer(__name__)

Confirm = Callable[[DeleteRequest], bool]


class CatalogController:
    """Maps Renderer intents onto the form session and catalog.

    Args:
        session: The form session owning the store and notifications
        confirm: Optional synchronous confirmation collaborator. Without it a
            delete request stays pending until ``on_confirm_delete`` arrives.
    """

    def __init__(self, session: FormSession, confirm: Confirm | None = None):
        self.session = session
        self.confirm = confirm

    @property
    def store(self):
        return self.session.store

    @property
    def notifications(self):
        return self.session.notifications

    @contextmanager
    def _intent(self, action: str, **context: Any) -> Iterator[None]:
        with tracer.start_as_current_span(f"catalog.{action}") as span:
            for key, value in context.items():
                span.set_attribute(key, value)
            log_user_action(action, **context)
            try:
                yield
            except PersistenceWriteError as e:
                span.record_exception(e)
                handle_domain_error(e, self.notifications, action)

    def on_field_change(self, field: str, value: Any) -> None:
        self.session.field_change(field, value)

    def on_submit(self) -> bool:
        changed = False
        with self._intent("submit", mode=self.session.mode.value):
            changed = self.session.submit()
        return changed

    def on_edit_request(self, product_id: int) -> bool:
        product = self.store.get(product_id)
        if product is None:
            logger.debug("Edit requested for unknown product", product_id=product_id)
            return False
        self.session.start_edit(product)
        return True

    def on_cancel(self) -> None:
        self.session.cancel()

    def on_delete_request(self, product_id: int) -> DeleteRequest | None:
        request = self.session.delete_requested(product_id)
        if request is not None and self.confirm is not None:
            self.on_confirm_delete(product_id, self.confirm(request))
        return request

    def on_confirm_delete(self, product_id: int, confirmed: bool) -> bool:
        deleted = False
        with self._intent("confirm_delete", product_id=product_id, confirmed=confirmed):
            deleted = self.session.confirm_delete(product_id, confirmed)
        return deleted

    def on_notification_timer(self) -> bool:
        return self.notifications.expire()

    def on_dismiss_notification(self) -> None:
        self.notifications.dismiss()

    def state(self) -> EngineState:
        return EngineState.capture(self.session)
