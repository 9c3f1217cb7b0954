"""
Admin dashboard charts (Plotly)
"""
from typing import Dict, List, Optional, Sequence, Tuple

import plotly.graph_objects as go

from database.models import Report
from database.schemas import Status, WasteType
from services.dashboard import monthly_trend, status_counts, type_counts

STATUS_COLORS = {
    Status.SUBMITTED: '#3b82f6',
    Status.IN_PROGRESS: '#f59e0b',
    Status.RESOLVED: '#22c55e',
}
STATUS_LABELS = {
    Status.SUBMITTED: 'Submitted',
    Status.IN_PROGRESS: 'In Progress',
    Status.RESOLVED: 'Resolved',
}
PRIMARY_GREEN = '#22c55e'

CHART_NAMES = ('status', 'type', 'trend')


def _layout(fig: go.Figure, **kwargs) -> go.Figure:
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10), height=280, **kwargs)
    return fig


def build_status_chart(counts: Dict[Status, int]) -> go.Figure:
    statuses = list(STATUS_LABELS)
    fig = go.Figure(go.Pie(
        labels=[STATUS_LABELS[s] for s in statuses],
        values=[counts.get(s, 0) for s in statuses],
        hole=0.5,
        marker=dict(colors=[STATUS_COLORS[s] for s in statuses]),
        sort=False,
    ))
    return _layout(fig, legend=dict(orientation='h', y=-0.1))


def build_type_chart(counts: Dict[WasteType, int]) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=[waste_type.label for waste_type in counts],
        y=list(counts.values()),
        marker_color=PRIMARY_GREEN,
        name='Reports by Type',
    ))
    fig.update_yaxes(rangemode='tozero')
    return _layout(fig, showlegend=False)


def build_trend_chart(trend: List[Tuple[str, int]]) -> go.Figure:
    fig = go.Figure(go.Scatter(
        x=[label for label, _ in trend],
        y=[count for _, count in trend],
        mode='lines+markers',
        line=dict(color=PRIMARY_GREEN, shape='spline'),
        fill='tozeroy',
        fillcolor='rgba(34, 197, 94, 0.1)',
        name='Monthly Reports',
    ))
    fig.update_yaxes(rangemode='tozero')
    return _layout(fig, showlegend=False)


class ChartBoard:
    """
    Holds the three admin charts

    Figures are rebuilt only when the report list changed, and the previous
    figures are released before new ones are made.
    """

    def __init__(self):
        self.figures: Dict[str, go.Figure] = {}
        self.revision: Optional[int] = None
        self.draw_count = 0

    def dispose(self):
        self.figures.clear()
        self.revision = None

    def draw(self, reports: Sequence[Report]) -> Dict[str, go.Figure]:
        self.dispose()
        self.figures = {
            'status': build_status_chart(status_counts(reports)),
            'type': build_type_chart(type_counts(reports)),
            'trend': build_trend_chart(monthly_trend(reports)),
        }
        self.draw_count += 1
        return self.figures

    def refresh(self, reports: Sequence[Report], revision: int) -> Dict[str, go.Figure]:
        if self.figures and revision == self.revision:
            return self.figures
        figures = self.draw(reports)
        self.revision = revision
        return figures
