"""
PlanetScale serverless dialect for async query builders.

Adapts a stateless, HTTP-transported SQL execution client to the driver and
connection contracts a query builder expects:

- PlanetScaleDialect: creates the driver and the query compiler
- PlanetScaleDriver: hands out logical connections; lifecycle hooks are no-ops
- PlanetScaleConnection: executes compiled queries and emulates transactions
- inflate_dates / format_date: datetime decoding and encoding at the wire
"""
__version__ = '0.1.0'

from planetscale_dialect.adapters import Field, cast, format_date
from planetscale_dialect.adapters import inflate_dates
from planetscale_dialect.client import Client, ExecutedQuery
from planetscale_dialect.compiler import QueryCompiler
from planetscale_dialect.connection import PlanetScaleConnection
from planetscale_dialect.dialect import PlanetScaleDialect
from planetscale_dialect.driver import PlanetScaleDriver
from planetscale_dialect.exceptions import DatabaseError, ExecutionError
from planetscale_dialect.exceptions import TransactionStateError
from planetscale_dialect.exceptions import TypeConversionError
from planetscale_dialect.exceptions import UnsupportedOperationError
from planetscale_dialect.options import DialectOptions
from planetscale_dialect.transaction import Transaction as transaction
from planetscale_dialect.types import CompiledQuery, QueryResult

__all__ = [
    'PlanetScaleDialect',
    'PlanetScaleDriver',
    'PlanetScaleConnection',
    'DialectOptions',
    'QueryCompiler',
    'CompiledQuery',
    'QueryResult',
    'Client',
    'ExecutedQuery',
    'Field',
    'cast',
    'inflate_dates',
    'format_date',
    'transaction',
    'DatabaseError',
    'ExecutionError',
    'TransactionStateError',
    'TypeConversionError',
    'UnsupportedOperationError',
]
