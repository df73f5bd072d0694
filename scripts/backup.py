"""Backup the local-storage file holding the entry ledger."""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from hoop_entry.config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    source = Path(settings.STORAGE_PATH)
    if not source.exists():
        raise SystemExit(f"Storage file not found: {source}")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"hoopentry_{ts}.json"
    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
