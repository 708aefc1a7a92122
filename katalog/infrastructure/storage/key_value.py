"""Key-value storage for serialized application state."""

from sqlalchemy.future import Engine
from sqlmodel import Session

from .models import StorageSlot


class SqlKeyValueStore:
    """Named text slots backed by the ``storage_slot`` table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def get(self, key: str) -> str | None:
        """Return the slot's contents, or None if the slot was never written."""
        with Session(self.engine) as session:
            slot = session.get(StorageSlot, key)
            return slot.value if slot else None

    def put(self, key: str, value: str) -> None:
        """Overwrite the slot's contents in a single transaction."""
        with Session(self.engine) as session:
            slot = session.get(StorageSlot, key)
            if slot is None:
                slot = StorageSlot(key=key, value=value)
            else:
                slot.value = value
            session.add(slot)
            session.commit()
