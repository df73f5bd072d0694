from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardData:
    """Read-model for the live dashboard (counts, charts, recent entries)."""

    total_entries: int
    total_revenue: int
    ticket_counts: dict[str, int]
    ticket_type_chart: list[dict]
    gender_chart: list[dict]
    gender_percentages: dict[str, int]
    hourly: list[dict]
    recent_entries: list[dict]


@dataclass(frozen=True)
class SponsorshipSummary:
    audience_reach: int
    student_count: int
    student_percentage: int
    female_percentage: int
    total_event_value: int


@dataclass(frozen=True)
class AnalyticsData:
    """Read-model for the analytics/sponsorship report."""

    total_entries: int
    student_entries: int
    total_revenue: int
    revenue_by_ticket: list[dict]
    gender_breakdown: list[dict]
    ticket_breakdown: dict[str, int]
    sponsorship: SponsorshipSummary
    average_ticket_value: float
    most_valuable_segment: str
