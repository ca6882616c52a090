"""
Dashboard list views.

A list view owns the loading lifecycle of one data source:

    Loading -> Success(records) | Failure(error)

``mount()`` starts the fetch as a task on the running event loop, ``settle()``
waits for it, and ``unmount()`` cancels it. A result that arrives after the
view was unmounted is dropped instead of being applied.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from flask import render_template

from .formatting import pluralize
from .sources import (
    ListDataSource, LoadFailure, TAB_UPCOMING, TAB_HISTORY, TAB_SUGGESTIONS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    records: Tuple


@dataclass(frozen=True)
class Failure:
    error: LoadFailure

    @property
    def message(self) -> str:
        return self.error.message


LOADING = Loading()

ViewState = Union[Loading, Success, Failure]


async def load(source: ListDataSource, failure_message: str) -> Union[Success, Failure]:
    """Run one fetch and tag its outcome"""
    try:
        records = await source.fetch()
    except Exception as e:
        logger.warning("%s: %s", failure_message, e, exc_info=not isinstance(e, LoadFailure))
        return Failure(LoadFailure(failure_message))

    records = tuple(records)
    logger.info("Loaded %d record(s) from %s", len(records), source.name)
    return Success(records)


class AsyncListView:
    """Base class for the three dashboard tabs"""

    tab = None
    title = ''
    noun: Optional[str] = None
    subtitle: Optional[str] = None
    loading_caption = 'Loading...'
    failure_message = 'Failed to load'
    empty_title = ''
    empty_hint = ''
    template = ''

    def __init__(self, source: ListDataSource):
        self.source = source
        self.state: ViewState = LOADING
        self.mounted = False
        self._task: Optional[asyncio.Task] = None

    def mount(self) -> asyncio.Task:
        """Start loading. Must be called from a running event loop.

        Mounting an already mounted view returns the fetch in flight, so each
        mount fetches exactly once.
        """
        if self.mounted:
            return self._task

        self.mounted = True
        self.state = LOADING
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def _run(self):
        result = await load(self.source, self.failure_message)
        if not self.mounted or asyncio.current_task() is not self._task:
            logger.info("Discarding %s result, view is no longer mounted", self.tab)
            return
        self.state = result

    def unmount(self):
        self.mounted = False
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def settle(self) -> ViewState:
        """Wait until the current fetch has finished or been cancelled"""
        if self._task is None:
            raise RuntimeError(f"{type(self).__name__} has not been mounted")
        await asyncio.wait([self._task])
        return self.state

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def records(self) -> Tuple:
        if isinstance(self.state, Success):
            return self.state.records
        return ()

    @property
    def header_caption(self) -> str:
        if self.noun:
            return pluralize(len(self.records), self.noun)
        return self.subtitle or ''

    def template_name(self) -> str:
        if self.is_loading:
            return 'views/loading.html'
        if isinstance(self.state, Failure):
            return 'views/failure.html'
        if not self.state.records:
            return 'views/empty.html'
        return self.template

    def render(self) -> str:
        return render_template(self.template_name(), view=self)


class UpcomingTripsView(AsyncListView):
    tab = TAB_UPCOMING
    title = 'Upcoming Trips'
    noun = 'trip'
    loading_caption = 'Loading your upcoming trips...'
    failure_message = 'Failed to load upcoming trips'
    empty_title = 'No upcoming trips'
    empty_hint = 'Start planning your next adventure!'
    template = 'views/upcoming_trips.html'


class BookingHistoryView(AsyncListView):
    tab = TAB_HISTORY
    title = 'Booking History'
    noun = 'booking'
    loading_caption = 'Loading your booking history...'
    failure_message = 'Failed to load booking history'
    empty_title = 'No booking history'
    empty_hint = 'Your past bookings will appear here'
    template = 'views/booking_history.html'


class SuggestionsView(AsyncListView):
    tab = TAB_SUGGESTIONS
    title = 'Personalized Suggestions'
    subtitle = 'Based on your travel preferences'
    loading_caption = 'Finding perfect destinations for you...'
    failure_message = 'Failed to load personalized suggestions'
    empty_title = 'No suggestions yet'
    empty_hint = 'Suggestions will appear as you travel more'
    template = 'views/suggestions.html'


VIEW_CLASSES = {
    TAB_UPCOMING: UpcomingTripsView,
    TAB_HISTORY: BookingHistoryView,
    TAB_SUGGESTIONS: SuggestionsView,
}
