from __future__ import annotations

from dataclasses import dataclass, field

from .model import TicketDecision
from .strategies.adult_strategy import AdultTicketStrategy
from .strategies.base import TicketStrategy
from .strategies.child_strategy import ChildTicketStrategy
from .strategies.student_strategy import StudentTicketStrategy


def _default_strategies() -> tuple[TicketStrategy, ...]:
    return (ChildTicketStrategy(), StudentTicketStrategy(), AdultTicketStrategy())


@dataclass
class TicketStrategyFactory:
    """Factory Pattern: pick the first strategy, in priority order, that applies."""

    strategies: tuple[TicketStrategy, ...] = field(default_factory=_default_strategies)

    def for_attendee(self, *, age: int, is_student: bool, student_card_verified: bool) -> TicketStrategy:
        for strategy in self.strategies:
            if strategy.applies(age=age, is_student=is_student, student_card_verified=student_card_verified):
                return strategy
        raise LookupError("No ticket strategy applies")


_factory = TicketStrategyFactory()


def calculate_ticket_details(age: int, is_student: bool, student_card_verified: bool) -> TicketDecision:
    """Classify an attendee: Child (<10) > verified Student > Adult.

    Age must already be validated as an integer by the caller.
    """
    strategy = _factory.for_attendee(age=age, is_student=is_student, student_card_verified=student_card_verified)
    return strategy.decide()
