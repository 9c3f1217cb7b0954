"""
CleanCity - Main Entry Point
Waste reporting for residents, collection schedules and an admin overview
Run with: streamlit run app.py
"""
import sys
from pathlib import Path

import streamlit as st

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent))

from services.app_state import create_app_state
from services.router import View, navigate, read_fragment
from views import about, admin_dashboard, home, report_form, schedule, signup, user_dashboard
from views.components import inject_css, show_flash_messages

APP_STATE_KEY = 'app_state'

VIEW_RENDERERS = {
    View.HOME: home.render,
    View.DASHBOARD: user_dashboard.render,
    View.REPORT: report_form.render,
    View.SCHEDULE: schedule.render,
    View.ADMIN: admin_dashboard.render,
    View.ABOUT: about.render,
    View.SIGNUP: signup.render,
}


def get_app_state():
    """Session state for this browser tab, built on first use"""
    if APP_STATE_KEY not in st.session_state:
        st.session_state[APP_STATE_KEY] = create_app_state()
    return st.session_state[APP_STATE_KEY]


def render_navigation(state):
    with st.sidebar:
        st.markdown("## 🌱 CleanCity")
        for view, active in state.router.active_links.items():
            if st.button(view.nav_label, key=f"nav_{view.value}", use_container_width=True,
                         type="primary" if active else "secondary"):
                navigate(view)

        st.markdown("---")
        st.markdown("### Quick Stats")
        st.metric("Total Reports", len(state.reports))


def main():
    st.set_page_config(
        page_title="CleanCity - Waste Management",
        page_icon="🌱",
        layout="wide",
    )
    inject_css()

    try:
        state = get_app_state()
    except Exception as e:
        st.error(f"Failed to open storage: {str(e)}")
        st.info("Check the CLEANCITY_STORAGE settings in your .env file.")
        return

    view = state.router.sync(read_fragment())
    render_navigation(state)
    show_flash_messages()
    VIEW_RENDERERS[view](state)


if __name__ == "__main__":
    main()
