from datetime import datetime, timedelta, timezone

from database.models import Report
from database.schemas import Priority, Status, WasteType
from services import dashboard

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_report(report_id, status=Status.SUBMITTED, waste_type=WasteType.OTHER,
                description="bags left out", date=None, updated_at=None):
    return Report(
        id=report_id,
        name="Resident",
        contact="555-0100",
        location=f"Street {report_id}",
        waste_type=waste_type,
        description=description,
        status=status,
        date=date or NOW - timedelta(days=report_id),
        updated_at=updated_at,
    )


def test_resolution_rate_of_no_reports_is_zero():
    assert dashboard.resolution_rate([]) == 0


def test_resolution_rate_rounds_half_up():
    reports = [make_report(1, Status.RESOLVED)] + [make_report(i) for i in range(2, 9)]
    assert dashboard.resolution_rate(reports) == 13  # 12.5%


def test_resolution_rate_all_resolved():
    reports = [make_report(i, Status.RESOLVED) for i in range(1, 4)]
    assert dashboard.resolution_rate(reports) == 100


def test_status_counts_cover_every_status():
    reports = [make_report(1), make_report(2, Status.IN_PROGRESS), make_report(3, Status.IN_PROGRESS)]
    counts = dashboard.status_counts(reports)
    assert counts == {
        Status.SUBMITTED: 1,
        Status.IN_PROGRESS: 2,
        Status.RESOLVED: 0,
        Status.ADMIN_ONLY: 0,
    }
    assert dashboard.active_issue_count(reports) == 3


def test_visible_reports_hide_admin_only():
    reports = [make_report(1), make_report(2, Status.ADMIN_ONLY)]
    assert [r.id for r in dashboard.visible_reports(reports)] == [1]


def test_recent_activity_uses_update_time_when_present():
    reports = [make_report(i) for i in range(1, 8)]
    reports[6].updated_at = NOW  # created a week ago, updated just now

    recent = dashboard.recent_activity(reports)

    assert len(recent) == 5
    assert [r.id for r in recent] == [7, 1, 2, 3, 4]


def test_priority_rules():
    assert dashboard.priority(make_report(1, waste_type=WasteType.HAZARDOUS_WASTE)) == Priority.HIGH
    assert dashboard.priority(make_report(2, description="DANGER near school")) == Priority.HIGH
    assert dashboard.priority(make_report(3, description="bins overflowing")) == Priority.HIGH
    assert dashboard.priority(make_report(4, waste_type=WasteType.ILLEGAL_DUMPING)) == Priority.MEDIUM
    assert dashboard.priority(make_report(5, waste_type=WasteType.RECYCLING_ISSUE)) == Priority.LOW


def test_priority_keyword_beats_waste_type():
    report = make_report(1, waste_type=WasteType.ILLEGAL_DUMPING, description="trash pile blocking sidewalk")
    assert dashboard.priority(report) == Priority.HIGH


def test_type_counts_keep_first_appearance_order():
    reports = [
        make_report(1, waste_type=WasteType.RECYCLING_ISSUE),
        make_report(2, waste_type=WasteType.OTHER),
        make_report(3, waste_type=WasteType.RECYCLING_ISSUE),
    ]
    assert list(dashboard.type_counts(reports).items()) == [
        (WasteType.RECYCLING_ISSUE, 2),
        (WasteType.OTHER, 1),
    ]


def test_average_response_days():
    reports = [
        make_report(1, Status.RESOLVED, date=NOW - timedelta(days=3), updated_at=NOW),
        make_report(2, Status.RESOLVED, date=NOW - timedelta(days=2), updated_at=NOW),
        make_report(3, Status.IN_PROGRESS, date=NOW - timedelta(days=9), updated_at=NOW),
    ]
    assert dashboard.average_response_days(reports) == 2.5
    assert dashboard.average_response_days([]) == 0.0


def test_monthly_trend_counts_real_creation_dates():
    reports = [
        make_report(1, date=datetime(2026, 6, 1, tzinfo=timezone.utc)),
        make_report(2, date=datetime(2026, 6, 10, tzinfo=timezone.utc)),
        make_report(3, date=datetime(2026, 2, 28, tzinfo=timezone.utc)),
        make_report(4, date=datetime(2025, 12, 31, tzinfo=timezone.utc)),  # outside the window
    ]

    trend = dashboard.monthly_trend(reports, now=NOW)

    assert trend == [
        ("Jan 2026", 0),
        ("Feb 2026", 1),
        ("Mar 2026", 0),
        ("Apr 2026", 0),
        ("May 2026", 0),
        ("Jun 2026", 2),
    ]


def test_monthly_trend_crosses_year_boundary():
    trend = dashboard.monthly_trend([], now=datetime(2026, 2, 1, tzinfo=timezone.utc))
    assert [label for label, _ in trend] == [
        "Sep 2025", "Oct 2025", "Nov 2025", "Dec 2025", "Jan 2026", "Feb 2026"
    ]


def test_format_time_ago():
    assert dashboard.format_time_ago(NOW - timedelta(minutes=59), NOW) == "Just now"
    assert dashboard.format_time_ago(NOW - timedelta(hours=5, minutes=30), NOW) == "5h ago"
    assert dashboard.format_time_ago(NOW - timedelta(hours=50), NOW) == "2d ago"


def test_summarize():
    reports = [make_report(1, Status.RESOLVED, updated_at=NOW), make_report(2)]
    summary = dashboard.summarize(reports)
    assert summary.total == 2
    assert summary.resolution_rate == 50
    assert summary.active == 1
    assert summary.recent[0].id == 1
