from __future__ import annotations

from enum import Enum


class TicketType(str, Enum):
    """Ticket category computed at check-in."""

    CHILD = "Child"
    STUDENT = "Student"
    ADULT = "Adult"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    """How the attendee paid at the door."""

    CASH = "Cash"
    CARD = "Card"
    VOUCHER = "Voucher"
    FREE_ENTRY = "Free Entry"
