import asyncio

from travelhub.sources import ListDataSource


class CountingSource(ListDataSource):
    """Returns the given records and counts how often it was asked"""

    name = 'counting'

    def __init__(self, records, latency=0.0):
        self.records = tuple(records)
        self.latency = latency
        self.calls = 0

    async def fetch(self):
        self.calls += 1
        await asyncio.sleep(self.latency)
        return self.records


class FailingSource(ListDataSource):
    name = 'failing'

    def __init__(self, exc=None, latency=0.0):
        self.exc = exc or RuntimeError('connection reset')
        self.latency = latency

    async def fetch(self):
        await asyncio.sleep(self.latency)
        raise self.exc


class StubUser:
    id = 1
    display_name = 'Asha'
