"""
Dialect entry point for the query-building layer.

    dialect = PlanetScaleDialect(
        host='aws.connect.psdb.cloud',
        username='<username>',
        password='<password>',
        client_factory=make_client,
    )

    # or with a connection URL

    dialect = PlanetScaleDialect(DialectOptions.from_url(
        os.environ['DATABASE_URL'], client_factory=make_client))

The dialect creates the driver and the query compiler. Schema introspection
reads through a live connection and is provided by the query-building layer.
"""
from typing import Any

from planetscale_dialect.compiler import QueryCompiler
from planetscale_dialect.driver import PlanetScaleDriver
from planetscale_dialect.options import DialectOptions

__all__ = ['PlanetScaleDialect']


class PlanetScaleDialect:

    def __init__(self, options: DialectOptions | None = None, **kw: Any) -> None:
        if options is None:
            options = DialectOptions(**kw)
        elif kw:
            raise TypeError('Pass either DialectOptions or keyword options, not both')
        self.options = options

    def create_driver(self) -> PlanetScaleDriver:
        return PlanetScaleDriver(self.options)

    def create_query_compiler(self) -> QueryCompiler:
        return QueryCompiler()
