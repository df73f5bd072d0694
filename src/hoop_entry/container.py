from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .core.constants import DEFAULT_STORAGE_KEY
from .entries.json_entry_repository import JsonEntryRepository
from .entries.ledger import EntryLedger
from .entries.service import EntryService
from .reports.service import ReportService
from .storage.local_storage import LocalStorage, StorageConfig


@dataclass(frozen=True)
class Container:
    storage: LocalStorage
    entries_repo: JsonEntryRepository
    ledger: EntryLedger

    entry_service: EntryService
    report_service: ReportService


def build_container(
    *,
    storage_path: Path | str,
    storage_key: str = DEFAULT_STORAGE_KEY,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    config = StorageConfig(path=Path(storage_path), key=storage_key)
    storage = LocalStorage(config.path)

    entries_repo = JsonEntryRepository(storage, config.key)
    ledger = EntryLedger.load(entries_repo, clock=clock)

    entry_service = EntryService(ledger)
    report_service = ReportService(ledger)

    return Container(
        storage=storage,
        entries_repo=entries_repo,
        ledger=ledger,
        entry_service=entry_service,
        report_service=report_service,
    )
