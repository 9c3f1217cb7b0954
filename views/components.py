"""
Shared widgets: page styling, badges, report cards and flash messages
"""
from datetime import datetime
from html import escape
from typing import Optional

import streamlit as st

from database.models import Report
from database.schemas import Priority, Status
from services.dashboard import format_time_ago

FLASH_KEY = 'flash_messages'

PAGE_CSS = """
    <style>
        .hero {
            background: linear-gradient(135deg, #16a34a, #22c55e);
            color: white;
            border-radius: 12px;
            padding: 2.5rem 2rem;
            margin-bottom: 1.5rem;
            text-align: center;
        }
        .hero h1 { color: white; margin-bottom: 0.5rem; }
        .status-badge {
            padding: 0.25rem 0.75rem;
            border-radius: 15px;
            font-size: 0.85rem;
            font-weight: bold;
            display: inline-block;
            margin: 0.25rem 0;
        }
        .status-submitted { background-color: #dbeafe; color: #1d4ed8; }
        .status-in-progress { background-color: #fef3c7; color: #b45309; }
        .status-resolved { background-color: #dcfce7; color: #15803d; }
        .status-admin-only { background-color: #f3f4f6; color: #4b5563; }
        .priority-high { color: #dc2626; font-weight: bold; }
        .priority-medium { color: #d97706; font-weight: bold; }
        .priority-low { color: #16a34a; font-weight: bold; }
        .report-card {
            border: 1px solid #e5e7eb;
            border-radius: 10px;
            padding: 1rem 1.25rem;
            margin-bottom: 1rem;
            background-color: #f9fafb;
        }
        .report-header {
            display: flex;
            justify-content: space-between;
            font-weight: bold;
            margin-bottom: 0.5rem;
        }
        .report-date, .report-meta { color: #6b7280; font-size: 0.85rem; }
        .schedule-card {
            border-left: 4px solid #22c55e;
            border-radius: 8px;
            padding: 1rem 1.25rem;
            margin-bottom: 1rem;
            background-color: #f0fdf4;
        }
        .time-badge {
            display: inline-block;
            background-color: white;
            border: 1px solid #bbf7d0;
            border-radius: 15px;
            padding: 0.2rem 0.7rem;
            margin: 0.2rem 0.3rem 0.2rem 0;
            font-size: 0.85rem;
        }
    </style>
"""


def inject_css():
    st.markdown(PAGE_CSS, unsafe_allow_html=True)


def status_badge_html(status: Status) -> str:
    return f'<span class="status-badge status-{status.value}">{status.value}</span>'


def priority_html(level: Priority) -> str:
    return f'<span class="priority-{level.value}">● {level.value}</span>'


def format_date(value: datetime) -> str:
    return value.astimezone().strftime("%b %d, %Y")


def report_card(report: Report):
    """Card used on the home page"""
    st.markdown(f"""
        <div class="report-card">
            <div class="report-header">
                <span>{report.waste_type.icon} {report.waste_type.label}</span>
                <span class="report-date">{format_date(report.date)}</span>
            </div>
            <div>📍 {escape(report.location)}</div>
            <p style="color: #4b5563; font-size: 0.9rem;">{escape(report.description)}</p>
            <div class="report-meta">Reported by: {escape(report.name)}</div>
        </div>
    """, unsafe_allow_html=True)
    if report.photo:
        try:
            st.image(report.photo, width=240)
        except Exception:
            st.caption("Image not available")


def compact_report_card(report: Report, now: Optional[datetime] = None):
    """Short card used on the resident dashboard"""
    description = report.description
    if len(description) > 80:
        description = description[:80] + "..."
    st.markdown(f"""
        <div class="report-card">
            <div class="report-header">
                {status_badge_html(report.status)}
                <span class="report-date">{format_time_ago(report.date, now)}</span>
            </div>
            <strong>{escape(report.location)}</strong>
            <p style="margin: 0; color: #4b5563; font-size: 0.9rem;">{escape(description)}</p>
        </div>
    """, unsafe_allow_html=True)


def flash(message: str, level: str = 'success'):
    """Queue a message to show after the next rerun"""
    st.session_state.setdefault(FLASH_KEY, []).append((level, message))


def show_flash_messages():
    for level, message in st.session_state.pop(FLASH_KEY, []):
        if level == 'error':
            st.error(message)
        elif level == 'warning':
            st.warning(message)
        else:
            st.success(message)
