"""
Shared fixtures: a recording fake execution client and dialect options
wired to it.

Usage:
    async def test_something(options, clients):
        cn = PlanetScaleConnection(options)
        await cn.execute_query(CompiledQuery.raw('select 1'))
        assert clients[0].statements == [('select 1', ())]
"""
import pytest
from planetscale_dialect.client import ExecutedQuery
from planetscale_dialect.options import DialectOptions


class FakeClient:
    """Execution client double that records every statement it receives.

    `responses` is consumed in order; once exhausted an empty result is
    returned. An exception in `responses` is raised instead of returned.
    """

    def __init__(self, config):
        self.config = config
        self.statements = []
        self.responses = []

    async def execute(self, sql, args=None):
        self.statements.append((sql, args))
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return ExecutedQuery(rows=[], rows_affected=0)

    @property
    def sql(self):
        return [sql for sql, _ in self.statements]


@pytest.fixture
def clients():
    """Every FakeClient created through `client_factory`, in creation order."""
    return []


@pytest.fixture
def client_factory(clients):
    def factory(config):
        client = FakeClient(config)
        clients.append(client)
        return client
    return factory


@pytest.fixture
def options(client_factory):
    return DialectOptions(
        host='aws.connect.psdb.cloud',
        username='testuser',
        password='testpass',
        client_factory=client_factory,
    )
