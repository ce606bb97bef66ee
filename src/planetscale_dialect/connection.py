"""
Logical connection over the stateless execution client.

The execution service has no transaction protocol: every call stands alone.
Transactions are emulated with a second `PlanetScaleConnection` (the
transaction connection) whose client issues BEGIN, then every statement,
then COMMIT or ROLLBACK. While a transaction connection is open, all
queries on the outer connection are routed to it.

States:
    IDLE            no transaction connection; queries use our own client
    IN_TRANSACTION  transaction connection present; queries are forwarded

The outer connection exclusively owns its transaction connection, and the
transaction connection never refers back to the outer one.
"""
import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any

from planetscale_dialect.adapters import convert_params
from planetscale_dialect.base import DatabaseConnection
from planetscale_dialect.client import connect, raise_for_error, response_value
from planetscale_dialect.exceptions import TransactionStateError
from planetscale_dialect.exceptions import UnsupportedOperationError
from planetscale_dialect.options import DialectOptions
from planetscale_dialect.types import CompiledQuery, QueryResult

logger = logging.getLogger(__name__)

__all__ = ['PlanetScaleConnection']


def _to_int(value: Any) -> int | None:
    return None if value is None else int(value)


class PlanetScaleConnection(DatabaseConnection):
    """Wraps one execution client and emulates transactions on top of it.

    Calls on one connection must not overlap; the owning query builder
    serializes them by awaiting each operation in turn.
    """

    def __init__(self, options: DialectOptions) -> None:
        self.options = options
        self.client = connect(options)
        self.transaction_connection: PlanetScaleConnection | None = None

    @property
    def in_transaction(self) -> bool:
        return self.transaction_connection is not None

    async def _run(self, sql: str, parameters: Sequence[Any] | None = None) -> Any:
        """Send one statement through our own client and surface embedded errors."""
        logger.debug(f'Executing on client {id(self.client)}: {sql}')
        response = await self.client.execute(sql, parameters)
        raise_for_error(response)
        return response

    async def execute_query(self, compiled_query: CompiledQuery) -> QueryResult:
        """Execute a compiled query.

        Routed to the transaction connection when one is open.
        """
        if self.transaction_connection is not None:
            return await self.transaction_connection.execute_query(compiled_query)

        if self.options.has_custom_format:
            parameters = compiled_query.parameters
        else:
            parameters = convert_params(compiled_query.parameters)

        response = await self._run(compiled_query.sql, parameters)

        return QueryResult(
            rows=list(response_value(response, 'rows', default=[])),
            num_affected_rows=_to_int(response_value(response, 'rows_affected', 'rowsAffected')),
            insert_id=_to_int(response_value(response, 'insert_id', 'insertId')),
        )

    async def begin_transaction(self) -> None:
        """Open a transaction, reusing the current one if already open.

        Nested transactions and savepoints are not modeled, so a second
        begin does not issue another BEGIN. The transaction connection is only
        kept once BEGIN succeeds.
        """
        if self.transaction_connection is not None:
            logger.debug(f'Transaction already open on connection {id(self)}')
            return
        transaction_connection = PlanetScaleConnection(self.options)
        await transaction_connection._run('BEGIN')
        self.transaction_connection = transaction_connection
        logger.debug(f'Started transaction for connection {id(self)}')

    async def commit_transaction(self) -> None:
        if self.transaction_connection is None:
            raise TransactionStateError('No transaction to commit')
        await self._end_transaction('COMMIT')
        logger.debug(f'Committed transaction for connection {id(self)}')

    async def rollback_transaction(self) -> None:
        if self.transaction_connection is None:
            raise TransactionStateError('No transaction to rollback')
        await self._end_transaction('ROLLBACK')
        logger.debug(f'Rolled back transaction for connection {id(self)}')

    async def _end_transaction(self, statement: str) -> None:
        transaction_connection = self.transaction_connection
        try:
            await transaction_connection._run(statement)
        finally:
            self.transaction_connection = None

    def stream_query(self, compiled_query: CompiledQuery,
                     chunk_size: int | None = None) -> AsyncIterator[QueryResult]:
        """Always raises: the serverless driver has no cursor to stream from.
        """
        raise UnsupportedOperationError('PlanetScale Serverless Driver does not support streaming')
