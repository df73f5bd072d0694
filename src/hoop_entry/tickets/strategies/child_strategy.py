from __future__ import annotations

from ...core.constants import CHILD_AGE_LIMIT
from ...core.enums import TicketType
from .base import TicketStrategy


class ChildTicketStrategy(TicketStrategy):
    """Under-10s, whatever their student status."""

    ticket_type = TicketType.CHILD

    def applies(self, *, age: int, is_student: bool, student_card_verified: bool) -> bool:
        return age < CHILD_AGE_LIMIT
