"""
Tab-switching dashboard shell
"""

import logging
from collections import namedtuple
from typing import Dict, Optional

from .session import Session
from .sources import ListDataSource, TAB_UPCOMING, TAB_HISTORY, TAB_SUGGESTIONS
from .views import AsyncListView, VIEW_CLASSES

logger = logging.getLogger(__name__)

Tab = namedtuple('Tab', ['id', 'label', 'icon'])

TABS = [
    Tab(TAB_UPCOMING, 'Upcoming Trips', 'calendar'),
    Tab(TAB_HISTORY, 'Booking History', 'clock'),
    Tab(TAB_SUGGESTIONS, 'Suggestions', 'star'),
]

DEFAULT_TAB = TAB_UPCOMING


class UnknownTabError(ValueError):
    pass


class DashboardShell:
    """Holds the active tab and the one view mounted for it"""

    tabs = TABS

    def __init__(self, session: Session, sources: Dict[str, ListDataSource],
                 active_tab: str = DEFAULT_TAB):
        self.session = session
        self.sources = sources
        self.active_tab = DEFAULT_TAB
        self.view: Optional[AsyncListView] = None
        self.select(active_tab)

    @property
    def user_name(self) -> str:
        return self.session.current_user.display_name

    def select(self, tab: str):
        if tab not in VIEW_CLASSES:
            raise UnknownTabError(f"Unknown tab: {tab}")
        self.active_tab = tab

    def create_view(self) -> AsyncListView:
        """Build an unmounted view for the active tab"""
        return VIEW_CLASSES[self.active_tab](self.sources[self.active_tab])

    def mount_active_view(self) -> AsyncListView:
        """Replace the mounted view with a fresh one for the active tab.

        Needs a running event loop, like ``AsyncListView.mount``.
        """
        if self.view is not None:
            self.view.unmount()
        self.view = self.create_view()
        self.view.mount()
        return self.view

    def sign_out(self):
        if self.view is not None:
            self.view.unmount()
        self.session.logout()
