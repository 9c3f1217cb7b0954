"""
Page routing for CleanCity

The 'page' query parameter is the single source of truth for the current
view. Navigation writes the parameter and reruns the script; the router then
reads it back on the next run.
"""
from enum import Enum
from typing import Callable, Dict, Optional

import streamlit as st

PAGE_PARAM = 'page'


class View(str, Enum):
    HOME = 'home'
    DASHBOARD = 'dashboard'
    REPORT = 'report'
    SCHEDULE = 'schedule'
    ADMIN = 'admin'
    ABOUT = 'about'
    SIGNUP = 'signup'

    @property
    def nav_label(self) -> str:
        return NAV_LABELS[self]


NAV_LABELS = {
    View.HOME: '🏠 Home',
    View.REPORT: '🗑️ Report Issue',
    View.SCHEDULE: '📅 Schedule',
    View.DASHBOARD: '📊 My Dashboard',
    View.ADMIN: '👑 Admin',
    View.ABOUT: 'ℹ️ About',
    View.SIGNUP: '📝 Sign Up',
}

# Order of links in the navigation bar
NAV_ORDER = list(NAV_LABELS)


def resolve_view(fragment: Optional[str]) -> View:
    """Map a page name to a view; empty or unknown names give HOME"""
    name = (fragment or '').strip().lstrip('#')
    try:
        return View(name)
    except ValueError:
        return View.HOME


def nav_link_states(active: View) -> Dict[View, bool]:
    """Which navigation links are highlighted: exactly the active one"""
    return {view: view is active for view in NAV_ORDER}


class Router:
    """
    Remembers the current view and reports transitions

    on_leave is called with the previous view whenever the view changes.
    """

    def __init__(self, on_leave: Optional[Callable[[View], None]] = None):
        self.current = View.HOME
        self.on_leave = on_leave

    def sync(self, fragment: Optional[str]) -> View:
        view = resolve_view(fragment)
        if view is not self.current:
            previous = self.current
            self.current = view
            if self.on_leave:
                self.on_leave(previous)
        return view

    @property
    def active_links(self) -> Dict[View, bool]:
        return nav_link_states(self.current)


def read_fragment() -> str:
    """Current page name from the URL (may be empty or unknown)"""
    return st.query_params.get(PAGE_PARAM, '')


def navigate(view: View):
    """Write the page name to the URL and rerun; the router picks it up"""
    st.query_params[PAGE_PARAM] = view.value
    st.rerun()
