from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import TICKET_PRICES
from ...core.enums import TicketType
from ..model import TicketDecision


class TicketStrategy(ABC):
    """Strategy Pattern: one ticket category and the rule that grants it."""

    ticket_type: TicketType

    @abstractmethod
    def applies(self, *, age: int, is_student: bool, student_card_verified: bool) -> bool:
        raise NotImplementedError

    def decide(self) -> TicketDecision:
        return TicketDecision(ticket_type=self.ticket_type, price=TICKET_PRICES[self.ticket_type])
