"""
Transaction handling for driver connections.
"""
import logging
from typing import Any

from planetscale_dialect.connection import PlanetScaleConnection
from planetscale_dialect.driver import PlanetScaleDriver
from planetscale_dialect.types import CompiledQuery, QueryResult

logger = logging.getLogger(__name__)


class Transaction:
    """Async context manager for running multiple statements in a transaction.

    Nested transactions on the same connection are not supported: entering a
    second Transaction reuses the one already open.

    Examples
        async with Transaction(driver, cn) as tx:
            await tx.execute('delete from ...', *args)
            await tx.execute('update from ...', *args)
    """

    def __init__(self, driver: PlanetScaleDriver, connection: PlanetScaleConnection) -> None:
        self.driver = driver
        self.connection = connection

    async def __aenter__(self):
        await self.driver.begin_transaction(self.connection)
        return self

    async def __aexit__(self, exc_type: type | None, value: Exception | None,
                        traceback: Any | None) -> None:
        if exc_type is not None:
            logger.warning('Rolling back the current transaction')
            await self.driver.rollback_transaction(self.connection)
        else:
            await self.driver.commit_transaction(self.connection)

    async def execute(self, sql: str, *args: Any) -> QueryResult:
        """Execute raw SQL within the transaction"""
        return await self.connection.execute_query(CompiledQuery.raw(sql, args))
