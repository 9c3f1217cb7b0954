from database.schemas import Status
from services.charts import ChartBoard, build_status_chart, build_type_chart
from services.dashboard import type_counts


def test_status_chart_values():
    fig = build_status_chart({Status.SUBMITTED: 2, Status.IN_PROGRESS: 1, Status.RESOLVED: 4})
    pie = fig.data[0]
    assert list(pie.labels) == ["Submitted", "In Progress", "Resolved"]
    assert list(pie.values) == [2, 1, 4]
    assert pie.hole == 0.5


def test_type_chart_uses_labels(state, report_data):
    state.reports.add(report_data)
    fig = build_type_chart(type_counts(state.reports.reports))
    assert list(fig.data[0].x) == ["Illegal Dumping"]
    assert list(fig.data[0].y) == [1]


def test_board_redraws_only_when_reports_change(state, report_data):
    board = ChartBoard()
    reports = state.reports

    first = board.refresh(reports.reports, reports.revision)
    again = board.refresh(reports.reports, reports.revision)
    assert again is first
    assert board.draw_count == 1

    reports.add(report_data)
    redrawn = board.refresh(reports.reports, reports.revision)

    assert board.draw_count == 2
    assert set(redrawn) == {"status", "type", "trend"}
    assert sum(redrawn["status"].data[0].values) == 1


def test_dispose_drops_figures(state):
    board = ChartBoard()
    board.refresh(state.reports.reports, state.reports.revision)
    board.dispose()
    assert board.figures == {}
    assert board.revision is None
