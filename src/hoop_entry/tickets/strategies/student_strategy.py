from __future__ import annotations

from ...core.enums import TicketType
from .base import TicketStrategy


class StudentTicketStrategy(TicketStrategy):
    """Students with a verified card."""

    ticket_type = TicketType.STUDENT

    def applies(self, *, age: int, is_student: bool, student_card_verified: bool) -> bool:
        return is_student and student_card_verified
