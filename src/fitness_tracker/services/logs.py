"""Ordered in-memory collections of logged entries."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID, uuid4

E = TypeVar("E")


@dataclass
class LogCollection(Generic[E]):
    """Insertion-ordered entries keyed by a generated id.

    ``factory`` builds an entry from ``id`` plus the payload fields, so the
    same collection serves meals and workouts.
    """

    factory: Callable[..., E]
    id_factory: Callable[[], UUID] = uuid4
    _entries: list[E] = field(default_factory=list, init=False)

    def add(self, payload: Mapping[str, object]) -> E:
        """Append a new entry with a fresh id and return it."""
        entry = self.factory(id=self.id_factory(), **payload)
        self._entries.append(entry)
        return entry

    def update(self, entry_id: UUID, payload: Mapping[str, object]) -> E | None:
        """Replace an entry in place, keeping its id and position."""
        for index, current in enumerate(self._entries):
            if _entry_id(current) == entry_id:
                updated = self.factory(id=entry_id, **payload)
                self._entries[index] = updated
                return updated
        return None

    def delete(self, entry_id: UUID) -> bool:
        """Remove an entry; return False when it was already gone."""
        remaining = [entry for entry in self._entries if _entry_id(entry) != entry_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        return removed

    def get(self, entry_id: UUID) -> E | None:
        """Return an entry by id, if present."""
        for entry in self._entries:
            if _entry_id(entry) == entry_id:
                return entry
        return None

    def list(self) -> list[E]:
        """Return entries in insertion order."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)


def _entry_id(entry: object) -> UUID:
    return entry.id  # type: ignore[attr-defined]
