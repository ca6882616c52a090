import asyncio

import pytest

from travelhub import sample_data
from travelhub.sources import SimulatedListSource, LoadFailure
from travelhub.views import (
    UpcomingTripsView, BookingHistoryView, SuggestionsView,
    Loading, Success, Failure, load,
)
from tests.helpers import CountingSource, FailingSource

VIEWS = [
    (UpcomingTripsView, sample_data.upcoming_trips),
    (BookingHistoryView, sample_data.booking_history),
    (SuggestionsView, sample_data.suggestions),
]


@pytest.mark.parametrize('view_class, records', VIEWS)
def test_view_is_loading_until_fetch_resolves(view_class, records):
    async def scenario():
        view = view_class(SimulatedListSource(records(), latency=0.05))
        view.mount()
        await asyncio.sleep(0)
        assert isinstance(view.state, Loading)
        assert view.is_loading
        assert view.records == ()
        assert view.template_name() == 'views/loading.html'
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert isinstance(view.state, Success)
    assert not view.is_loading


@pytest.mark.parametrize('view_class, records', VIEWS)
def test_view_keeps_source_order(view_class, records):
    expected = list(reversed(records()))

    async def scenario():
        view = view_class(SimulatedListSource(expected, latency=0))
        view.mount()
        return await view.settle()

    state = asyncio.run(scenario())
    assert list(state.records) == expected


def test_view_fetches_once_per_mount():
    source = CountingSource(sample_data.upcoming_trips())

    async def scenario():
        view = UpcomingTripsView(source)
        first = view.mount()
        second = view.mount()
        assert first is second
        await view.settle()
        view.mount()
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert source.calls == 1
    assert isinstance(view.state, Success)


def test_remount_fetches_again():
    source = CountingSource(sample_data.booking_history())

    async def scenario():
        view = BookingHistoryView(source)
        view.mount()
        await view.settle()
        view.unmount()
        view.mount()
        assert isinstance(view.state, Loading)
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert source.calls == 2
    assert len(view.records) == 4


def test_failure_becomes_failure_state():
    async def scenario():
        view = UpcomingTripsView(FailingSource())
        view.mount()
        return await view.settle()

    state = asyncio.run(scenario())
    assert isinstance(state, Failure)
    assert state.message == 'Failed to load upcoming trips'


def test_load_tags_outcome():
    ok = asyncio.run(load(CountingSource([1, 2]), 'nope'))
    bad = asyncio.run(load(FailingSource(LoadFailure('HTTP 500')), 'Failed to load booking history'))

    assert ok == Success((1, 2))
    assert isinstance(bad.error, LoadFailure)
    assert bad.message == 'Failed to load booking history'


def test_unmount_before_resolve_discards_result():
    async def scenario():
        view = SuggestionsView(SimulatedListSource(sample_data.suggestions(), latency=0.05))
        task = view.mount()
        await asyncio.sleep(0)
        view.unmount()
        state = await view.settle()
        return view, task, state

    view, task, state = asyncio.run(scenario())
    assert task.cancelled()
    assert not view.mounted
    assert isinstance(state, Loading)
    assert view.records == ()


def test_sibling_views_are_independent():
    async def scenario():
        trips = UpcomingTripsView(SimulatedListSource(sample_data.upcoming_trips(), latency=0.01))
        history = BookingHistoryView(FailingSource(latency=0.01))
        trips.mount()
        history.mount()
        await asyncio.gather(trips.settle(), history.settle())
        return trips, history

    trips, history = asyncio.run(scenario())
    assert isinstance(trips.state, Success)
    assert len(trips.records) == 3
    assert isinstance(history.state, Failure)


def test_settle_requires_mount():
    view = UpcomingTripsView(CountingSource([]))
    with pytest.raises(RuntimeError):
        asyncio.run(view.settle())


@pytest.mark.parametrize('count, caption', [(0, '0 trips'), (1, '1 trip'), (2, '2 trips')])
def test_header_pluralizes_count(count, caption):
    trips = sample_data.upcoming_trips()[:count]

    async def scenario():
        view = UpcomingTripsView(SimulatedListSource(trips, latency=0))
        view.mount()
        await view.settle()
        return view

    assert asyncio.run(scenario()).header_caption == caption


def test_empty_collection_uses_empty_template():
    async def scenario():
        view = BookingHistoryView(SimulatedListSource([], latency=0))
        view.mount()
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert isinstance(view.state, Success)
    assert view.template_name() == 'views/empty.html'
    assert view.empty_title == 'No booking history'


def test_suggestions_header_has_no_count():
    view = SuggestionsView(CountingSource([]))
    assert view.header_caption == 'Based on your travel preferences'


def test_render_each_state(app):
    async def scenario():
        view = UpcomingTripsView(SimulatedListSource(sample_data.upcoming_trips(), latency=0))
        loading = view.render()
        view.mount()
        await view.settle()
        return loading, view.render()

    with app.app_context():
        loading, loaded = asyncio.run(scenario())

    assert 'Loading your upcoming trips...' in loading
    assert 'Alleppey, Kerala' not in loading
    assert '3 trips' in loaded
    assert 'Alleppey, Kerala' in loaded
    assert loaded.index('Alleppey, Kerala') < loaded.index('Agra, Delhi') < loaded.index('Manali')


def test_render_failure(app):
    async def scenario():
        view = SuggestionsView(FailingSource())
        view.mount()
        await view.settle()
        return view.render()

    with app.app_context():
        html = asyncio.run(scenario())

    assert 'Failed to load personalized suggestions' in html
