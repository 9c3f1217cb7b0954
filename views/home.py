"""
Home page: welcome banner, headline numbers and the latest reports
"""
import streamlit as st

from database.schemas import Status
from services.dashboard import resolution_rate, status_counts
from services.router import View, navigate
from views.components import report_card

RECENT_REPORTS_LIMIT = 6


def render(state):
    reports = state.reports.reports

    st.markdown("""
        <div class="hero">
            <h1>Keep Your Neighborhood Clean</h1>
            <p>Report waste issues, check collection schedules, and help build a cleaner, greener community.</p>
        </div>
    """, unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🗑️ Report an Issue", use_container_width=True, type="primary", key="home_report"):
            navigate(View.REPORT)
    with col2:
        if st.button("📅 View Schedule", use_container_width=True, key="home_schedule"):
            navigate(View.SCHEDULE)

    counts = status_counts(reports)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Reports", len(reports))
    with col2:
        st.metric("Resolution Rate", f"{resolution_rate(reports)}%")
    with col3:
        st.metric("In Progress", counts[Status.IN_PROGRESS])

    st.markdown("## Recent Reports")
    recent = reports[:RECENT_REPORTS_LIMIT]
    if not recent:
        st.info("No reports yet. Be the first to report a waste issue!")
        return

    columns = st.columns(3)
    for index, report in enumerate(recent):
        with columns[index % 3]:
            report_card(report)
