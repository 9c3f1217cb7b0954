"""
Figures shown on the home page and both dashboards
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from database.models import Report
from database.schemas import Priority, Status, WasteType, URGENT_WORDS

RECENT_ACTIVITY_LIMIT = 5
TREND_MONTHS = 6


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def status_counts(reports: Sequence[Report]) -> Dict[Status, int]:
    counts = {status: 0 for status in Status}
    for report in reports:
        counts[report.status] += 1
    return counts


def resolution_rate(reports: Sequence[Report]) -> int:
    """Percentage of resolved reports, 0 when there are none"""
    total = len(reports)
    if total == 0:
        return 0
    resolved = sum(1 for r in reports if r.status == Status.RESOLVED)
    return round_half_up(resolved / total * 100)


def active_issue_count(reports: Sequence[Report]) -> int:
    """Reports still needing attention"""
    return sum(1 for r in reports if r.status in (Status.SUBMITTED, Status.IN_PROGRESS))


def visible_reports(reports: Sequence[Report]) -> List[Report]:
    """Reports a resident may see"""
    return [r for r in reports if r.status != Status.ADMIN_ONLY]


def recent_activity(reports: Sequence[Report], limit: int = RECENT_ACTIVITY_LIMIT) -> List[Report]:
    """Most recently created or updated reports, latest first"""
    return sorted(reports, key=lambda r: r.last_activity, reverse=True)[:limit]


def type_counts(reports: Sequence[Report]) -> Dict[WasteType, int]:
    """Reports per waste type, in order of first appearance"""
    counts: Dict[WasteType, int] = {}
    for report in reports:
        counts[report.waste_type] = counts.get(report.waste_type, 0) + 1
    return counts


def priority(report: Report) -> Priority:
    """
    Advisory priority for the admin table

    Hazardous waste, or any urgent word in the description, is high;
    illegal dumping is medium; everything else is low.
    """
    description = report.description.lower()
    if report.waste_type == WasteType.HAZARDOUS_WASTE or any(word in description for word in URGENT_WORDS):
        return Priority.HIGH
    if report.waste_type == WasteType.ILLEGAL_DUMPING:
        return Priority.MEDIUM
    return Priority.LOW


def average_response_days(reports: Sequence[Report]) -> float:
    """Mean days from filing to resolution over resolved reports"""
    durations = [
        (r.updated_at - r.date).total_seconds() / 86400
        for r in reports
        if r.status == Status.RESOLVED and r.updated_at is not None
    ]
    if not durations:
        return 0.0
    return round(sum(durations) / len(durations), 1)


def monthly_trend(reports: Sequence[Report], now: Optional[datetime] = None,
                  months: int = TREND_MONTHS) -> List[Tuple[str, int]]:
    """
    Reports filed per calendar month, oldest month first

    Returns:
        List of (month label, count) covering the last `months` months up to now
    """
    now = now or datetime.now(timezone.utc)
    last_index = now.year * 12 + now.month - 1
    first_index = last_index - months + 1
    counts = [0] * months
    for report in reports:
        created = report.date.astimezone(now.tzinfo) if now.tzinfo else report.date
        index = created.year * 12 + created.month - 1
        if first_index <= index <= last_index:
            counts[index - first_index] += 1

    trend = []
    for offset, count in enumerate(counts):
        year, month = divmod(first_index + offset, 12)
        label = datetime(year, month + 1, 1).strftime("%b %Y")
        trend.append((label, count))
    return trend


def format_time_ago(when: datetime, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    hours = math.floor((now - when).total_seconds() / 3600)
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


@dataclass
class DashboardSummary:
    total: int
    counts: Dict[Status, int]
    resolution_rate: int
    active: int
    average_response_days: float
    recent: List[Report]


def summarize(reports: Sequence[Report]) -> DashboardSummary:
    return DashboardSummary(
        total=len(reports),
        counts=status_counts(reports),
        resolution_rate=resolution_rate(reports),
        active=active_issue_count(reports),
        average_response_days=average_response_days(reports),
        recent=recent_activity(reports),
    )
