"""
Per-session application state
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from database.database import get_storage
from database.models import ReportRepository, UserRepository
from database.store import KeyValueStore
from services.charts import ChartBoard
from services.router import Router
from services.scheduler import TaskRegistry


@dataclass
class AppState:
    store: KeyValueStore
    reports: ReportRepository
    users: UserRepository
    tasks: TaskRegistry = field(default_factory=TaskRegistry)
    router: Router = field(default_factory=Router)
    charts: ChartBoard = field(default_factory=ChartBoard)

    def close(self):
        """Cancel all pending work and drop the charts"""
        self.tasks.cancel_all()
        self.charts.dispose()


def create_app_state(store: Optional[KeyValueStore] = None,
                     clock: Optional[Callable[[], datetime]] = None) -> AppState:
    """Build the state for one session and load both collections"""
    if store is None:
        store = KeyValueStore(get_storage())
    tasks = TaskRegistry()
    state = AppState(
        store=store,
        reports=ReportRepository(store, clock=clock),
        users=UserRepository(store),
        tasks=tasks,
        router=Router(on_leave=tasks.cancel_owner),
    )
    state.reports.load()
    state.users.load()
    return state
