from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import TicketType


@dataclass(frozen=True)
class TicketDecision:
    """Ticket category and price decided for one attendee."""

    ticket_type: TicketType
    price: int
