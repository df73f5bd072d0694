"""Seed demo entries into local storage through the service layer."""

from __future__ import annotations

import importlib
import random

from hoop_entry.config import get_settings_module
from hoop_entry.container import build_container
from hoop_entry.core.enums import Gender, PaymentMethod
from hoop_entry.entries.service import EntryForm

DEMO_NAMES = ["Thabo", "Lerato", "Sipho", "Naledi", None, "Ayanda", None, "Kagiso"]


def main(count: int = 25) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_path=settings.STORAGE_PATH, storage_key=settings.STORAGE_KEY)

    rng = random.Random(42)
    for _ in range(count):
        age = rng.randint(5, 60)
        is_student = 10 <= age <= 25 and rng.random() < 0.6
        container.entry_service.submit(
            EntryForm(
                name=rng.choice(DEMO_NAMES),
                age=age,
                gender=rng.choice(list(Gender)).value,
                payment_method=rng.choice(list(PaymentMethod)).value,
                is_student=is_student,
                student_card_verified=is_student,
            )
        )

    agg = container.ledger.derive_aggregates()
    print(f"OK: Seeded {count} entries -> {settings.STORAGE_PATH} (total={agg.total_entries}, revenue={agg.total_revenue})")


if __name__ == "__main__":
    main()
