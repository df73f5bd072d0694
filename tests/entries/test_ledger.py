from __future__ import annotations

from datetime import datetime
from itertools import count

import pytest

from hoop_entry.core.enums import Gender, PaymentMethod, TicketType
from hoop_entry.entries.ledger import EntryLedger
from hoop_entry.entries.model import EntryRecord, NewEntry


class FakeClock:
    def __init__(self, *moments: datetime):
        self._moments = list(moments)

    def __call__(self) -> datetime:
        return self._moments.pop(0)


class InMemoryEntries:
    def __init__(self, entries=()):
        self.saved = list(entries)
        self.save_calls = 0

    def load_all(self):
        return list(self.saved)

    def save_all(self, entries):
        self.save_calls += 1
        self.saved = list(entries)


def make_new_entry(**overrides) -> NewEntry:
    data = dict(
        age=25,
        gender=Gender.MALE,
        is_student=False,
        student_card_verified=False,
        ticket_type=TicketType.ADULT,
        ticket_price=20,
        payment_method=PaymentMethod.CASH,
    )
    data.update(overrides)
    return NewEntry(**data)


def sequential_ids():
    counter = count(1)
    return lambda: f"entry-{next(counter)}"


def test_append_assigns_id_and_timestamp_and_keeps_order():
    clock = FakeClock(datetime(2026, 3, 1, 18, 5), datetime(2026, 3, 1, 18, 7))
    ledger = EntryLedger(clock=clock, id_factory=sequential_ids())

    result = ledger.append(make_new_entry(name="Sipho"))
    ledger.append(make_new_entry(age=7, ticket_type=TicketType.CHILD, ticket_price=10))

    assert result is None
    first, second = ledger.entries
    assert (first.id, first.timestamp, first.name) == ("entry-1", datetime(2026, 3, 1, 18, 5), "Sipho")
    assert (second.id, second.ticket_type) == ("entry-2", TicketType.CHILD)


def test_append_does_not_touch_existing_entries():
    ledger = EntryLedger(clock=lambda: datetime(2026, 3, 1, 18, 0), id_factory=sequential_ids())
    ledger.append(make_new_entry())
    before = ledger.entries

    ledger.append(make_new_entry(gender=Gender.FEMALE))

    assert ledger.entries[:1] == before
    assert len(ledger) == 2


def test_entries_snapshot_is_immutable():
    ledger = EntryLedger(clock=lambda: datetime(2026, 3, 1, 18, 0))
    ledger.append(make_new_entry())

    with pytest.raises(AttributeError):
        ledger.entries[0].ticket_price = 5


def test_append_then_aggregate_adds_one_to_matching_buckets():
    ledger = EntryLedger(clock=lambda: datetime(2026, 3, 1, 19, 30))
    ledger.append(make_new_entry())
    before = ledger.derive_aggregates()

    ledger.append(make_new_entry(gender=Gender.OTHER, ticket_type=TicketType.STUDENT, ticket_price=15, is_student=True, student_card_verified=True))
    after = ledger.derive_aggregates()

    assert after.total_entries == before.total_entries + 1
    assert after.ticket_counts[TicketType.STUDENT] == before.ticket_counts[TicketType.STUDENT] + 1
    assert after.gender_counts[Gender.OTHER] == before.gender_counts[Gender.OTHER] + 1
    assert after.entries_by_hour["19:00"] == before.entries_by_hour["19:00"] + 1
    assert after.total_revenue == before.total_revenue + 15


def test_clear_yields_zero_aggregates():
    ledger = EntryLedger(clock=lambda: datetime(2026, 3, 1, 20, 0))
    ledger.append(make_new_entry())
    ledger.append(make_new_entry(gender=Gender.FEMALE))

    ledger.clear()
    agg = ledger.derive_aggregates()

    assert len(ledger) == 0
    assert agg.total_entries == 0
    assert agg.total_revenue == 0
    assert set(agg.ticket_counts.values()) == {0}
    assert set(agg.gender_counts.values()) == {0}
    assert agg.entries_by_hour == {}


def test_version_and_subscribers_follow_changes():
    ledger = EntryLedger(clock=lambda: datetime(2026, 3, 1, 20, 0))
    seen = []
    unsubscribe = ledger.subscribe(lambda changed: seen.append(len(changed)))

    ledger.append(make_new_entry())
    ledger.clear()
    unsubscribe()
    ledger.append(make_new_entry())

    assert seen == [1, 0]
    assert ledger.version == 3


def test_load_reads_stored_entries_and_writes_back_on_change():
    stored = EntryRecord.create(make_new_entry(), entry_id="entry-old", timestamp=datetime(2026, 2, 1, 9, 0))
    repo = InMemoryEntries([stored])

    ledger = EntryLedger.load(repo, clock=lambda: datetime(2026, 3, 1, 18, 0), id_factory=lambda: "entry-new")
    assert ledger.entries == (stored,)
    assert repo.save_calls == 0

    ledger.append(make_new_entry())
    assert [e.id for e in repo.saved] == ["entry-old", "entry-new"]

    ledger.clear()
    assert repo.saved == []
    assert repo.save_calls == 2
