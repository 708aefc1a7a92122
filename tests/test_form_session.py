"""Tests for the create/edit form state machine."""

from datetime import timedelta

import pytest

from katalog.application.form_session import FormSession, Mode
from katalog.application.notifications import Severity
from katalog.domain import messages
from katalog.domain.exceptions import UnknownFieldError


def _fill(session: FormSession, **values):
    for field, value in values.items():
        session.field_change(field, value)


def test_session_starts_in_create_mode(session: FormSession):
    assert session.mode is Mode.CREATING
    assert session.editing_id is None
    assert session.draft == {"name": "", "description": ""}
    assert session.errors == {}


def test_invalid_submit_keeps_catalog_and_reports_errors(session: FormSession):
    """A two-character name is rejected without touching the catalog."""
    before = session.store.all()
    _fill(session, name="AB")

    assert session.submit() is False

    assert session.store.all() == before
    assert session.errors == {"name": messages.name_too_short(3)}
    assert session.notifications.current().severity is Severity.DANGER
    assert session.draft["name"] == "AB"


def test_duplicate_name_rejected_case_insensitively(session: FormSession):
    session.store.create({"name": "Sembako", "description": ""})
    before = session.store.all()
    _fill(session, name="sembako")

    assert session.submit() is False
    assert session.errors == {"name": messages.NAME_DUPLICATE}
    assert session.store.all() == before


def test_create_prepends_and_resets(session: FormSession):
    before = session.store.all()
    _fill(session, name="  Gula Pasir ", description="Gula pasir 1kg")

    assert session.submit() is True

    products = session.store.all()
    assert len(products) == len(before) + 1
    assert products[0].name == "Gula Pasir"
    assert products[0].description == "Gula pasir 1kg"
    assert products[0].id not in {p.id for p in before}
    assert session.mode is Mode.CREATING
    assert session.draft == {"name": "", "description": ""}

    notification = session.notifications.current()
    assert notification.severity is Severity.SUCCESS
    assert notification.message == messages.PRODUCT_ADDED


def test_field_change_clears_only_that_field_error(session: FormSession):
    _fill(session, name="", description="d" * 201)
    session.submit()
    assert set(session.errors) == {"name", "description"}

    session.field_change("name", "Kopi")

    assert set(session.errors) == {"description"}


def test_field_change_rejects_unknown_fields(session: FormSession):
    with pytest.raises(UnknownFieldError):
        session.field_change("price", 1000)


def test_edit_updates_record_in_place(session: FormSession):
    product = session.store.get(2)
    session.start_edit(product)

    assert session.mode is Mode.EDITING
    assert session.draft == {"name": "Minuman", "description": product.description}

    session.field_change("name", "MINUMAN")
    assert session.submit() is True

    assert session.store.get(2).name == "MINUMAN"
    assert [p.id for p in session.store.all()] == [1, 2]
    assert session.notifications.current().message == messages.PRODUCT_UPDATED
    assert session.mode is Mode.CREATING


def test_edit_then_cancel_leaves_catalog_unchanged(session: FormSession):
    before = session.store.all()
    session.start_edit(session.store.get(1))
    session.field_change("name", "NewName")

    session.cancel()

    assert session.store.all() == before
    assert session.mode is Mode.CREATING
    assert session.draft == {"name": "", "description": ""}


def test_invalid_edit_stays_in_edit_mode(session: FormSession):
    session.start_edit(session.store.get(1))
    session.field_change("name", "Minuman")

    assert session.submit() is False
    assert session.mode is Mode.EDITING
    assert session.editing_id == 1


def test_start_edit_clears_errors(session: FormSession):
    session.submit()
    assert session.errors
    session.start_edit(session.store.get(1))
    assert session.errors == {}


def test_start_edit_drops_pending_delete(session: FormSession):
    session.delete_requested(1)
    session.start_edit(session.store.get(2))

    assert session.pending_delete is None
    assert session.confirm_delete(1, True) is False
    assert session.store.get(1) is not None


def test_delete_requires_confirmation(session: FormSession):
    request = session.delete_requested(1)

    assert request.product_id == 1
    assert request.prompt == messages.confirm_delete_prompt("Makanan")
    assert session.store.get(1) is not None


def test_delete_declined_keeps_record(session: FormSession):
    before = session.store.all()
    session.delete_requested(1)

    assert session.confirm_delete(1, False) is False

    assert session.store.all() == before
    assert session.pending_delete is None


def test_delete_confirmed_removes_record(session: FormSession):
    session.delete_requested(1)

    assert session.confirm_delete(1, True) is True

    assert session.store.get(1) is None
    assert session.notifications.current().message == messages.PRODUCT_DELETED


def test_deleting_record_under_edit_resets_form(session: FormSession):
    session.start_edit(session.store.get(2))
    session.delete_requested(2)
    session.confirm_delete(2, True)

    assert session.mode is Mode.CREATING
    assert session.editing_id is None


def test_deleting_other_record_keeps_edit(session: FormSession):
    session.start_edit(session.store.get(2))
    session.field_change("name", "Minuman Dingin")
    session.delete_requested(1)
    session.confirm_delete(1, True)

    assert session.editing_id == 2
    assert session.draft["name"] == "Minuman Dingin"


def test_delete_request_for_unknown_id_is_a_no_op(session: FormSession):
    assert session.delete_requested(404) is None
    assert session.pending_delete is None


def test_unrequested_confirmation_is_ignored(session: FormSession):
    before = session.store.all()
    assert session.confirm_delete(1, True) is False
    session.delete_requested(2)
    assert session.confirm_delete(1, True) is False
    assert session.store.all() == before


def test_extended_release_date_tomorrow_rejected(extended_session: FormSession, today):
    _fill(
        extended_session,
        name="Kopi Bubuk",
        description="Kopi robusta bubuk murni 200 gram",
        price="25000",
        category="Minuman",
        release_date=(today + timedelta(days=1)).isoformat(),
        stock=5,
    )

    assert extended_session.submit() is False
    assert extended_session.errors == {"release_date": messages.RELEASE_DATE_IN_FUTURE}

    extended_session.field_change("release_date", today.isoformat())
    assert extended_session.submit() is True

    product = extended_session.store.all()[0]
    assert product.release_date == today
    assert product.price == 25000.0
    assert product.stock == 5
    assert product.is_active is True


def test_extended_edit_populates_all_fields(extended_session: FormSession):
    product = extended_session.store.get(3)
    extended_session.start_edit(product)

    assert extended_session.draft == {
        "name": "Sabun Cuci Piring",
        "description": product.description,
        "price": 14000.0,
        "category": "Kebersihan",
        "release_date": product.release_date,
        "stock": 0,
        "is_active": False,
    }
