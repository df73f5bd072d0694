from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..common.datetime_utils import hour_key
from ..core.enums import Gender, TicketType
from ..entries.model import EntryRecord


def _zero_by(enum_cls) -> dict:
    return {member: 0 for member in enum_cls}


@dataclass(frozen=True)
class Aggregates:
    """Summary statistics derived from the ledger's current contents."""

    total_entries: int = 0
    total_revenue: int = 0
    ticket_counts: dict[TicketType, int] = field(default_factory=lambda: _zero_by(TicketType))
    revenue_by_ticket: dict[TicketType, int] = field(default_factory=lambda: _zero_by(TicketType))
    gender_counts: dict[Gender, int] = field(default_factory=lambda: _zero_by(Gender))
    entries_by_hour: dict[str, int] = field(default_factory=dict)


def derive_aggregates(entries: Iterable[EntryRecord]) -> Aggregates:
    """Single read-only pass over ``entries``.

    Revenue uses each record's stored price. Hour buckets ignore the date and
    keep first-seen order.
    """
    total_entries = 0
    total_revenue = 0
    ticket_counts = _zero_by(TicketType)
    revenue_by_ticket = _zero_by(TicketType)
    gender_counts = _zero_by(Gender)
    by_hour: dict[str, int] = {}

    for e in entries:
        total_entries += 1
        total_revenue += e.ticket_price
        ticket_counts[e.ticket_type] += 1
        revenue_by_ticket[e.ticket_type] += e.ticket_price
        gender_counts[e.gender] += 1
        key = hour_key(e.timestamp)
        by_hour[key] = by_hour.get(key, 0) + 1

    return Aggregates(
        total_entries=total_entries,
        total_revenue=total_revenue,
        ticket_counts=ticket_counts,
        revenue_by_ticket=revenue_by_ticket,
        gender_counts=gender_counts,
        entries_by_hour=by_hour,
    )
