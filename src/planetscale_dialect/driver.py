"""
Driver handed to the query-building layer.

The execution service is connectionless, so there is no pool to warm up,
return connections to, or tear down: `init`, `release_connection` and
`destroy` do nothing. Transaction state lives on the connections; the
driver only delegates.
"""
import logging

from planetscale_dialect.base import Driver
from planetscale_dialect.connection import PlanetScaleConnection
from planetscale_dialect.options import DialectOptions

logger = logging.getLogger(__name__)

__all__ = ['PlanetScaleDriver']


class PlanetScaleDriver(Driver):

    def __init__(self, options: DialectOptions) -> None:
        self.options = options

    async def init(self) -> None:
        pass

    async def acquire_connection(self) -> PlanetScaleConnection:
        """Create a new logical connection.

        Never fails and never touches the network: clients connect lazily.
        """
        connection = PlanetScaleConnection(self.options)
        logger.debug(f'Acquired connection {id(connection)}')
        return connection

    create_connection = acquire_connection

    async def begin_transaction(self, connection: PlanetScaleConnection) -> None:
        await connection.begin_transaction()

    async def commit_transaction(self, connection: PlanetScaleConnection) -> None:
        await connection.commit_transaction()

    async def rollback_transaction(self, connection: PlanetScaleConnection) -> None:
        await connection.rollback_transaction()

    async def release_connection(self, connection: PlanetScaleConnection) -> None:
        pass

    async def destroy(self) -> None:
        pass
