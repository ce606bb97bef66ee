"""
Capability contracts expected by the query-building layer.

A driver hands out connections and owns nothing else; a connection executes
compiled queries and controls transactions on itself. Concrete
implementations live in `planetscale_dialect.driver` and
`planetscale_dialect.connection`.
"""
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from planetscale_dialect.types import CompiledQuery, QueryResult


class DatabaseConnection(ABC):
    """Connection capability set.
    """

    @abstractmethod
    async def execute_query(self, compiled_query: CompiledQuery) -> QueryResult:
        """Execute a compiled query and return its result."""

    @abstractmethod
    def stream_query(self, compiled_query: CompiledQuery,
                     chunk_size: int | None = None) -> AsyncIterator[QueryResult]:
        """Stream results in chunks of `chunk_size` rows."""


class Driver(ABC):
    """Driver capability set.
    """

    @abstractmethod
    async def init(self) -> None:
        """Prepare the driver before first use."""

    @abstractmethod
    async def acquire_connection(self) -> DatabaseConnection:
        """Return a connection for one logical checkout."""

    @abstractmethod
    async def begin_transaction(self, connection: DatabaseConnection) -> None:
        ...

    @abstractmethod
    async def commit_transaction(self, connection: DatabaseConnection) -> None:
        ...

    @abstractmethod
    async def rollback_transaction(self, connection: DatabaseConnection) -> None:
        ...

    @abstractmethod
    async def release_connection(self, connection: DatabaseConnection) -> None:
        """Give a connection back after use."""

    @abstractmethod
    async def destroy(self) -> None:
        """Release driver-wide resources."""
