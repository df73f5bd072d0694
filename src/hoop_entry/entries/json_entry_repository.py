from __future__ import annotations

import json
from typing import Sequence

from ..storage.local_storage import LocalStorage
from .model import EntryRecord


class JsonEntryRepository:
    """Entries as one JSON array stored under a single local-storage key.

    Corrupt stored data is not handled here: decode errors propagate.
    """

    def __init__(self, storage: LocalStorage, key: str):
        self._storage = storage
        self._key = key

    def load_all(self) -> Sequence[EntryRecord]:
        raw = self._storage.get_item(self._key)
        if not raw:
            return []
        return [EntryRecord.from_dict(item) for item in json.loads(raw)]

    def save_all(self, entries: Sequence[EntryRecord]) -> None:
        payload = json.dumps([e.to_dict() for e in entries], ensure_ascii=False)
        self._storage.set_item(self._key, payload)
