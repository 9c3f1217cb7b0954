import pytest

from services.router import NAV_ORDER, Router, View, nav_link_states, resolve_view


@pytest.mark.parametrize("fragment, view", [
    ("home", View.HOME),
    ("dashboard", View.DASHBOARD),
    ("report", View.REPORT),
    ("schedule", View.SCHEDULE),
    ("admin", View.ADMIN),
    ("about", View.ABOUT),
    ("signup", View.SIGNUP),
    ("#admin", View.ADMIN),
])
def test_known_fragments(fragment, view):
    assert resolve_view(fragment) is view


@pytest.mark.parametrize("fragment", [None, "", "#", "settings", "ADMIN", "report/1"])
def test_empty_or_unknown_fragments_fall_back_to_home(fragment):
    assert resolve_view(fragment) is View.HOME


def test_every_view_has_a_nav_link():
    assert set(NAV_ORDER) == set(View)
    assert all(view.nav_label for view in View)


@pytest.mark.parametrize("active", list(View))
def test_exactly_one_link_is_active(active):
    states = nav_link_states(active)
    assert [view for view, is_active in states.items() if is_active] == [active]


def test_router_reports_each_transition():
    left = []
    router = Router(on_leave=left.append)

    assert router.sync("") is View.HOME
    assert router.sync("report") is View.REPORT
    assert router.sync("report") is View.REPORT
    assert router.sync("nonsense") is View.HOME

    assert left == [View.HOME, View.REPORT]
    assert router.active_links[View.HOME]
