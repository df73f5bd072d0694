from __future__ import annotations

import math
from typing import Optional

from ..common.datetime_utils import format_timestamp
from ..core.constants import CHART_COLORS
from ..core.enums import Gender, TicketType
from ..entries.ledger import EntryLedger
from ..entries.model import EntryRecord
from .aggregates import Aggregates
from .model import AnalyticsData, DashboardData, SponsorshipSummary

TICKET_COLORS = {
    TicketType.CHILD: CHART_COLORS["blue"],
    TicketType.STUDENT: CHART_COLORS["light_blue"],
    TicketType.ADULT: CHART_COLORS["orange"],
}

GENDER_COLORS = {
    Gender.MALE: CHART_COLORS["blue"],
    Gender.FEMALE: CHART_COLORS["orange"],
    Gender.OTHER: CHART_COLORS["light_blue"],
}


def percentage(part: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    return int(math.floor(part / total * 100 + 0.5))


def most_valuable_segment(revenue: dict[TicketType, int]) -> str:
    """Segment with the highest revenue; ties go to Adults, then Students."""
    adult = revenue[TicketType.ADULT]
    student = revenue[TicketType.STUDENT]
    child = revenue[TicketType.CHILD]
    if adult >= student and adult >= child:
        return "Adults"
    if student >= child:
        return "Students"
    return "Children"


class ReportService:
    """Builds dashboard and analytics read-models from the ledger.

    Everything is recomputed from the current entries on each call.
    """

    def __init__(self, ledger: EntryLedger):
        self._ledger = ledger

    def aggregates(self) -> Aggregates:
        return self._ledger.derive_aggregates()

    def build_dashboard(self, *, recent_limit: Optional[int] = None) -> DashboardData:
        agg = self.aggregates()
        total = agg.total_entries

        recent = list(reversed(self._ledger.entries))
        if recent_limit is not None and recent_limit >= 0:
            recent = recent[:recent_limit]

        return DashboardData(
            total_entries=total,
            total_revenue=agg.total_revenue,
            ticket_counts={t.value: agg.ticket_counts[t] for t in TicketType},
            ticket_type_chart=[
                {"name": t.value, "value": agg.ticket_counts[t], "color": TICKET_COLORS[t]} for t in TicketType
            ],
            gender_chart=[{"name": g.value, "value": agg.gender_counts[g], "color": GENDER_COLORS[g]} for g in Gender],
            gender_percentages={g.value: percentage(agg.gender_counts[g], total) for g in Gender},
            hourly=[{"hour": hour, "count": count} for hour, count in agg.entries_by_hour.items()],
            recent_entries=[self._to_ui(e) for e in recent],
        )

    def build_analytics(self) -> AnalyticsData:
        agg = self.aggregates()
        total = agg.total_entries
        students = agg.ticket_counts[TicketType.STUDENT]

        return AnalyticsData(
            total_entries=total,
            student_entries=students,
            total_revenue=agg.total_revenue,
            revenue_by_ticket=[
                {"name": t.value, "revenue": agg.revenue_by_ticket[t], "count": agg.ticket_counts[t]}
                for t in TicketType
            ],
            gender_breakdown=[
                {
                    "name": g.value,
                    "value": agg.gender_counts[g],
                    "percentage": percentage(agg.gender_counts[g], max(total, 1)),
                }
                for g in Gender
            ],
            ticket_breakdown={t.value: agg.ticket_counts[t] for t in TicketType},
            sponsorship=SponsorshipSummary(
                audience_reach=total,
                student_count=students,
                student_percentage=percentage(students, max(total, 1)),
                female_percentage=percentage(agg.gender_counts[Gender.FEMALE], max(total, 1)),
                total_event_value=agg.total_revenue,
            ),
            average_ticket_value=agg.total_revenue / max(total, 1),
            most_valuable_segment=most_valuable_segment(agg.revenue_by_ticket),
        )

    def _to_ui(self, e: EntryRecord) -> dict:
        return {
            "id": e.id,
            "time": format_timestamp(e.timestamp),
            "name": e.name or "N/A",
            "age": e.age,
            "gender": e.gender.value,
            "ticket_type": e.ticket_type.value,
            "price": e.ticket_price,
            "payment_method": e.payment_method.value,
        }
