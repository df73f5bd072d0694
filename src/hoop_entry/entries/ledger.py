from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local
from ..reports.aggregates import Aggregates, derive_aggregates
from .model import EntryRecord, NewEntry, new_entry_id
from .repository import EntryRepository

logger = logging.getLogger(__name__)

Listener = Callable[["EntryLedger"], None]


class EntryLedger:
    """Append-only, ordered collection of entry records for one event session.

    Existing records are never mutated or removed individually; the only
    destructive operation is ``clear``. Every change bumps ``version`` and
    notifies subscribers with the ledger.
    """

    def __init__(
        self,
        entries: Iterable[EntryRecord] = (),
        *,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._entries: list[EntryRecord] = list(entries)
        self._clock = clock or now_local
        self._id_factory = id_factory or new_entry_id
        self._listeners: list[Listener] = []
        self._version = 0
        self._lock = threading.RLock()

    @classmethod
    def load(cls, repository: EntryRepository, **kwargs) -> "EntryLedger":
        """Build a ledger from stored entries and write back on every change."""
        ledger = cls(repository.load_all(), **kwargs)
        ledger.subscribe(lambda changed: repository.save_all(changed.entries))
        logger.debug("ledger loaded with %d entries", len(ledger))
        return ledger

    @property
    def entries(self) -> tuple[EntryRecord, ...]:
        return tuple(self._entries)

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._entries)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def append(self, entry: NewEntry) -> None:
        with self._lock:
            record = EntryRecord.create(entry, entry_id=self._id_factory(), timestamp=self._clock())
            self._entries.append(record)
            self._changed()

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._changed()

    def derive_aggregates(self) -> Aggregates:
        return derive_aggregates(self._entries)

    def _changed(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            listener(self)
