"""Snapshots of engine state handed to the Renderer."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from ..application.form_session import DeleteRequest, FormSession, Mode
from ..application.notifications import Notification, Severity
from ..domain.entities import Product


class ProductView(BaseModel):
    id: int
    name: str
    description: str
    price: float | None = None
    category: str | None = None
    release_date: date | None = None
    stock: int | None = None
    is_active: bool | None = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductView":
        return cls(id=product.id, **product.field_values())


class NotificationView(BaseModel):
    message: str = ""
    severity: Severity = Severity.SUCCESS
    visible: bool = False
    expires_at: float | None = None

    @classmethod
    def from_domain(cls, notification: Notification | None) -> "NotificationView":
        if notification is None:
            return cls()
        return cls(
            message=notification.message,
            severity=notification.severity,
            visible=True,
            expires_at=notification.expires_at,
        )


class DeleteRequestView(BaseModel):
    product_id: int
    name: str
    prompt: str

    @classmethod
    def from_domain(cls, request: DeleteRequest | None) -> "DeleteRequestView | None":
        if request is None:
            return None
        return cls(product_id=request.product_id, name=request.name, prompt=request.prompt)


class EngineState(BaseModel):
    """Everything the Renderer needs to draw the form, table and toast."""

    mode: Mode
    editing_id: int | None = None
    draft: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    products: list[ProductView] = Field(default_factory=list)
    notification: NotificationView = Field(default_factory=NotificationView)
    pending_delete: DeleteRequestView | None = None
    description_counter: str = ""

    @property
    def is_editing(self) -> bool:
        return self.mode == Mode.EDITING

    @classmethod
    def capture(cls, session: FormSession) -> "EngineState":
        return cls(
            mode=session.mode,
            editing_id=session.editing_id,
            draft=dict(session.draft),
            errors=dict(session.errors),
            products=[ProductView.from_domain(p) for p in session.store.all()],
            notification=NotificationView.from_domain(
                session.notifications.current()
            ),
            pending_delete=DeleteRequestView.from_domain(session.pending_delete),
            description_counter=_description_counter(session),
        )


def _description_counter(session: FormSession) -> str:
    length = len(str(session.draft.get("description") or ""))
    maximum = session.policy.max_description_length
    return f"{length}/{maximum}" if maximum is not None else str(length)
