"""
Admin Dashboard - CleanCity
Overview figures, charts and the table of all reports with status actions
"""
import streamlit as st

from database.models import Report
from database.schemas import REPORT_STATUS_ENUM
from services.dashboard import priority, summarize
from views.components import format_date, priority_html, status_badge_html

TABLE_COLUMNS = [1, 2, 2, 2, 2, 1, 2, 1]
TABLE_HEADERS = ["ID", "Type", "Location", "Reporter", "Date", "Priority", "Status", "Actions"]


def short_id(report: Report) -> str:
    return f"#{str(report.id)[-4:]}"


def type_title(report: Report) -> str:
    return " ".join(word.capitalize() for word in report.waste_type.value.split('-'))


def filter_reports(reports, status_filter: str, search: str):
    """Apply the status dropdown and the free-text search box"""
    filtered = reports
    if status_filter != "All":
        filtered = [r for r in filtered if r.status.value == status_filter]
    if search:
        search_lower = search.lower()
        filtered = [r for r in filtered
                    if search_lower in r.description.lower() or
                    search_lower in r.name.lower() or
                    search_lower in r.location.lower()]
    return filtered


def render_kpis(summary):
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Reports", summary.total)
        st.caption("All Time")
    with col2:
        st.metric("Resolution Rate", f"{summary.resolution_rate}%")
        st.caption("Success Rate")
    with col3:
        st.metric("Active Issues", summary.active)
        st.caption("Need Attention")
    with col4:
        st.metric("Avg Response", f"{summary.average_response_days}d")
        st.caption("Time to Resolve")


def render_charts(state, reports):
    figures = state.charts.refresh(reports, state.reports.revision)
    col1, col2, col3 = st.columns(3)
    for column, (title, name) in zip((col1, col2, col3), (
            ("Reports by Status", 'status'),
            ("Reports by Type", 'type'),
            ("Monthly Trend", 'trend'))):
        with column:
            st.markdown(f"**{title}**")
            st.plotly_chart(figures[name], use_container_width=True, key=f"chart_{name}")


def render_report_row(state, report: Report, index: int):
    cells = st.columns(TABLE_COLUMNS)
    cells[0].markdown(short_id(report))
    cells[1].markdown(type_title(report))
    # Plain text: resident input is shown as typed
    cells[2].text(report.location)
    cells[3].text(report.name)
    cells[4].markdown(format_date(report.date))
    cells[5].markdown(priority_html(priority(report)), unsafe_allow_html=True)
    cells[6].markdown(status_badge_html(report.status), unsafe_allow_html=True)

    next_status = report.status.next_status
    if next_status is not None:
        if cells[7].button(report.status.action_label, key=f"advance_{index}_{report.id}"):
            try:
                state.reports.update_status(report.id, next_status)
            except Exception as e:
                st.error(f"Error updating report: {str(e)}")
                return
            st.rerun()


def render_reports_table(state, reports):
    st.markdown("### All Reports")
    st.caption("Manage and track all waste management reports")

    col1, col2 = st.columns(2)
    with col1:
        status_filter = st.selectbox("Filter by Status", ["All"] + REPORT_STATUS_ENUM)
    with col2:
        search = st.text_input("🔍 Search", placeholder="Search by description, reporter or location...")

    filtered = filter_reports(reports, status_filter, search)
    st.markdown(f"**Total Reports: {len(reports)} | Filtered: {len(filtered)}**")

    header = st.columns(TABLE_COLUMNS)
    for cell, title in zip(header, TABLE_HEADERS):
        cell.markdown(f"**{title}**")

    if not filtered:
        st.info("No reports found")
        return

    # Ids are not guaranteed unique, so widget keys include the row
    for index, report in enumerate(filtered):
        render_report_row(state, report, index)


def render(state):
    reports = state.reports.reports

    st.title("👑 Admin Dashboard")
    st.markdown("Waste Management System Overview")

    render_kpis(summarize(reports))
    st.markdown("---")
    render_charts(state, reports)
    st.markdown("---")
    render_reports_table(state, reports)
