"""Collects errors with notes for reporting after a batch of work."""

from __future__ import annotations

from dataclasses import dataclass

from vfoxkit.util.sets import MapSet


@dataclass(frozen=True)
class _ErrorItem:
    note: str
    err: BaseException


class ErrorStore:
    """Stores errors, each tagged with a note."""

    def __init__(self) -> None:
        self._items: list[_ErrorItem] = []

    def add(self, note: str, err: BaseException) -> None:
        """Record an error under a note."""
        self._items.append(_ErrorItem(note, err))

    def add_and_show(self, note: str, err: BaseException) -> None:
        """Record an error and print it to standard output."""
        self.add(note, err)
        print(err)

    def notes(self) -> list[str]:
        """Return every note in the order the errors were added."""
        return [item.note for item in self._items]

    def note_set(self) -> MapSet[str]:
        """Return the distinct notes."""
        return MapSet(item.note for item in self._items)

    def has_error(self) -> bool:
        """Return True if any error has been recorded."""
        return bool(self._items)