from __future__ import annotations

from ...core.enums import TicketType
from .base import TicketStrategy


class AdultTicketStrategy(TicketStrategy):
    """Fallback: everyone else pays full price."""

    ticket_type = TicketType.ADULT

    def applies(self, *, age: int, is_student: bool, student_card_verified: bool) -> bool:
        return True
