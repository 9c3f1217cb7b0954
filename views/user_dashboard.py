"""
Resident dashboard: report counts, latest reports and recent activity
"""
from datetime import datetime, timezone
from html import escape

import streamlit as st

from database.schemas import Status
from services.dashboard import format_time_ago, recent_activity, status_counts, visible_reports
from services.router import View, navigate
from views.components import compact_report_card

MY_REPORTS_LIMIT = 4


def render_activity(reports, now):
    st.markdown("### Recent Activity")
    activity = recent_activity(reports)
    if not activity:
        st.info("No recent activity")
        return
    for report in activity:
        st.markdown(
            f"{report.status.icon} **{report.status.activity_message}**  \n"
            f"{escape(report.location)}  \n"
            f"<span style='color: #6b7280; font-size: 0.85rem;'>{format_time_ago(report.last_activity, now)}</span>",
            unsafe_allow_html=True
        )
        st.markdown("---")


def render(state):
    reports = visible_reports(state.reports.reports)
    counts = status_counts(reports)
    now = datetime.now(timezone.utc)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.title("📊 My Dashboard")
    with col2:
        action1, action2 = st.columns(2)
        with action1:
            if st.button("🗑️ New Report", use_container_width=True, key="dash_report"):
                navigate(View.REPORT)
        with action2:
            if st.button("📅 Schedule", use_container_width=True, key="dash_schedule"):
                navigate(View.SCHEDULE)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Pending", counts[Status.SUBMITTED])
        st.caption("Awaiting Review")
    with col2:
        st.metric("In Progress", counts[Status.IN_PROGRESS])
        st.caption("Being Addressed")
    with col3:
        st.metric("Resolved", counts[Status.RESOLVED])
        st.caption("Completed")
    with col4:
        st.metric("Total Reports", len(reports))
        st.caption("All Time")

    st.markdown("---")

    left, right = st.columns(2)
    with left:
        st.markdown("### My Recent Reports")
        if reports:
            grid = st.columns(2)
            for index, report in enumerate(reports[:MY_REPORTS_LIMIT]):
                with grid[index % 2]:
                    compact_report_card(report, now)
        else:
            st.info("No reports yet. Start by reporting a waste issue!")
            if st.button("🗑️ Report Issue", type="primary", key="dash_empty_report"):
                navigate(View.REPORT)
    with right:
        render_activity(reports, now)
