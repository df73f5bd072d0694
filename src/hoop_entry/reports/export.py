from __future__ import annotations

import io
from datetime import date
from typing import Iterable, Sequence

import pandas as pd

from ..common.datetime_utils import export_date_stamp, format_timestamp
from ..core.constants import CSV_HEADERS
from ..entries.model import EntryRecord


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def export_row(e: EntryRecord) -> list:
    return [
        e.id,
        format_timestamp(e.timestamp),
        e.name or "N/A",
        e.age,
        e.gender.value,
        _yes_no(e.is_student),
        _yes_no(e.student_card_verified),
        e.ticket_type.value,
        e.ticket_price,
        e.payment_method.value,
    ]


def entries_to_csv(entries: Iterable[EntryRecord]) -> str:
    """Header plus one comma-joined line per entry.

    Values are not quoted, so a name containing a comma shifts its row's columns.
    """
    lines = [",".join(CSV_HEADERS)]
    for e in entries:
        lines.append(",".join(str(v) for v in export_row(e)))
    return "\n".join(lines)


def entries_to_xlsx(entries: Sequence[EntryRecord]) -> bytes:
    df = pd.DataFrame([export_row(e) for e in entries], columns=list(CSV_HEADERS))
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Entries")
    return out.getvalue()


def export_filename(day: date, extension: str = "csv") -> str:
    return f"hoopentry-export-{export_date_stamp(day)}.{extension}"
