"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import TicketType

TICKET_PRICES = {
    TicketType.CHILD: 10,
    TicketType.STUDENT: 15,
    TicketType.ADULT: 20,
}

CHILD_AGE_LIMIT = 10

MIN_AGE = 0
MAX_AGE = 120

DEFAULT_STORAGE_KEY = "hoopentryData"

CSV_HEADERS = (
    "ID",
    "Time",
    "Name",
    "Age",
    "Gender",
    "Is Student",
    "Card Verified",
    "Ticket Type",
    "Price",
    "Payment",
)

CHART_COLORS = {
    "blue": "#0077C2",
    "light_blue": "#33A1FF",
    "orange": "#FF6B00",
}
