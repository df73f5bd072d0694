from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import Gender, PaymentMethod, TicketType

_ID_ALPHABET = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class NewEntry:
    """Attendee data accepted by the ledger (id and timestamp not yet assigned)."""

    age: int
    gender: Gender
    is_student: bool
    student_card_verified: bool
    ticket_type: TicketType
    ticket_price: int
    payment_method: PaymentMethod
    name: Optional[str] = None


@dataclass(frozen=True)
class EntryRecord:
    """Domain entity: one attendee's check-in plus its ticket classification.

    Ticket type and price are frozen at creation time.
    """

    id: str
    timestamp: datetime
    age: int
    gender: Gender
    is_student: bool
    student_card_verified: bool
    ticket_type: TicketType
    ticket_price: int
    payment_method: PaymentMethod
    name: Optional[str] = None

    @classmethod
    def create(cls, entry: NewEntry, *, entry_id: str, timestamp: datetime) -> "EntryRecord":
        return cls(
            id=entry_id,
            timestamp=timestamp,
            age=entry.age,
            gender=entry.gender,
            is_student=entry.is_student,
            student_card_verified=entry.student_card_verified,
            ticket_type=entry.ticket_type,
            ticket_price=entry.ticket_price,
            payment_method=entry.payment_method,
            name=entry.name,
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "age": self.age,
            "gender": self.gender.value,
            "isStudent": self.is_student,
            "studentCardVerified": self.student_card_verified,
            "ticketType": self.ticket_type.value,
            "ticketPrice": self.ticket_price,
            "paymentMethod": self.payment_method.value,
        }
        if self.name is not None:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "EntryRecord":
        return cls(
            id=str(data["id"]),
            timestamp=parse_iso_datetime(data["timestamp"]),
            age=int(data["age"]),
            gender=Gender(data["gender"]),
            is_student=bool(data["isStudent"]),
            student_card_verified=bool(data["studentCardVerified"]),
            ticket_type=TicketType(data["ticketType"]),
            ticket_price=data["ticketPrice"],
            payment_method=PaymentMethod(data["paymentMethod"]),
            name=data.get("name"),
        )


def new_entry_id() -> str:
    """Unique id in the form ``entry-<epoch-millis>-<9 base36 chars>``."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"entry-{millis}-{suffix}"
