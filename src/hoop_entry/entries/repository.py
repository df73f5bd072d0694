from __future__ import annotations

from typing import Protocol, Sequence

from .model import EntryRecord


class EntryRepository(Protocol):
    def load_all(self) -> Sequence[EntryRecord]:
        """Return stored entries in insertion order (empty when nothing is stored)."""

        raise NotImplementedError

    def save_all(self, entries: Sequence[EntryRecord]) -> None:
        """Replace the stored entries with ``entries``."""

        raise NotImplementedError
