"""
Data sources for the dashboard list views.

Every source exposes a single coroutine, ``fetch()``, that resolves to an
ordered tuple of records or raises ``LoadFailure``. The simulated sources
sleep for a fixed latency and return the fixed sample data; ``HttpListSource``
reads the same collections from a JSON endpoint.
"""

import asyncio
import logging
from typing import Dict, Optional, Sequence, Tuple, Type

import requests

from . import sample_data
from .records import UpcomingTrip, BookingHistoryEntry, Suggestion

logger = logging.getLogger(__name__)

TAB_UPCOMING = 'upcoming'
TAB_HISTORY = 'history'
TAB_SUGGESTIONS = 'suggestions'


class LoadFailure(Exception):
    """A collection could not be loaded"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ListDataSource:
    """Base class for anything a list view can load records from"""

    name = 'source'

    async def fetch(self) -> Tuple:
        raise NotImplementedError


class SimulatedListSource(ListDataSource):
    """Returns a fixed collection after a fixed delay"""

    def __init__(self, records: Sequence, latency: float = 1.0, name: str = 'simulated'):
        self.records = tuple(records)
        self.latency = latency
        self.name = name

    async def fetch(self) -> Tuple:
        logger.debug("Simulating %s fetch (%.2fs)", self.name, self.latency)
        await asyncio.sleep(self.latency)
        return self.records


class HttpListSource(ListDataSource):
    """Reads a collection from a dashboard JSON endpoint"""

    def __init__(self, url: str, record_type: Type, timeout: float = 5.0,
                 headers: Optional[Dict[str, str]] = None, name: str = 'http'):
        self.url = url
        self.record_type = record_type
        self.timeout = timeout
        self.headers = {'Accept': 'application/json', **(headers or {})}
        self.name = name

    def _get(self) -> Tuple:
        response = requests.get(self.url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        payload = response.json()

        if not isinstance(payload, dict):
            raise LoadFailure('Unexpected response from %s' % self.url)

        if payload.get('status') != 'success':
            raise LoadFailure(payload.get('message', 'Unexpected response from %s' % self.url))

        return tuple(self.record_type.from_dict(item) for item in payload['items'])

    async def fetch(self) -> Tuple:
        logger.info("Fetching %s from %s", self.name, self.url)
        try:
            return await asyncio.to_thread(self._get)
        except LoadFailure:
            raise
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            raise LoadFailure(f"Error fetching {self.url}: {e}") from e


def upcoming_trips_source(latency: float = 1.0) -> SimulatedListSource:
    return SimulatedListSource(sample_data.upcoming_trips(), latency, name='upcoming trips')


def booking_history_source(latency: float = 1.0) -> SimulatedListSource:
    return SimulatedListSource(sample_data.booking_history(), latency, name='booking history')


def suggestions_source(latency: float = 1.0) -> SimulatedListSource:
    return SimulatedListSource(sample_data.suggestions(), latency, name='suggestions')


RECORD_TYPES = {
    TAB_UPCOMING: UpcomingTrip,
    TAB_HISTORY: BookingHistoryEntry,
    TAB_SUGGESTIONS: Suggestion,
}


def build_sources(config, headers: Optional[Dict[str, str]] = None) -> Dict[str, ListDataSource]:
    """Create one data source per dashboard tab.

    Uses the JSON API at ``DASHBOARD_API_URL`` when it is configured and the
    simulated sources otherwise.
    """
    base_url = config.get('DASHBOARD_API_URL')
    if base_url:
        timeout = config.get('DASHBOARD_API_TIMEOUT', 5.0)
        return {
            tab: HttpListSource(
                f"{base_url.rstrip('/')}/api/dashboard/{tab}",
                record_type,
                timeout=timeout,
                headers=headers,
                name=tab,
            )
            for tab, record_type in RECORD_TYPES.items()
        }

    return simulated_sources(config.get('SIMULATED_LATENCY', 1.0))


def simulated_sources(latency: float = 1.0) -> Dict[str, ListDataSource]:
    return {
        TAB_UPCOMING: upcoming_trips_source(latency),
        TAB_HISTORY: booking_history_source(latency),
        TAB_SUGGESTIONS: suggestions_source(latency),
    }
