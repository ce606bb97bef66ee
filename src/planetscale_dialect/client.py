"""
Boundary to the remote SQL execution client.

The execution client is an external, stateless, HTTP-transported service
handle. This module only describes the shape this package relies on and
normalizes the two ways client versions report SQL errors:

1. Raising from `execute` (current clients). The exception propagates as-is.
2. Returning the error embedded in the response under `error` (older
   clients). `raise_for_error` turns it into a raised exception so it can
   never be mistaken for an empty successful result.

Testing notes:

Any object with an async `execute(sql, args=None)` method works as a client,
so a recording fake is enough for unit tests:

    class FakeClient:
        def __init__(self, config):
            self.config = config
            self.statements = []

        async def execute(self, sql, args=None):
            self.statements.append((sql, args))
            return ExecutedQuery(rows=[], rows_affected=0)

    options = DialectOptions(host='aws.connect.psdb.cloud', client_factory=FakeClient)
"""
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from planetscale_dialect.adapters import Field
from planetscale_dialect.exceptions import ExecutionError

if TYPE_CHECKING:
    from planetscale_dialect.options import DialectOptions

logger = logging.getLogger(__name__)

__all__ = [
    'Client',
    'ExecutedQuery',
    'connect',
    'raise_for_error',
    'response_value',
]


@runtime_checkable
class Client(Protocol):
    """One execution client instance (a Connection Handle)."""

    async def execute(self, sql: str, args: Sequence[Any] | None = None) -> Any:
        ...


@dataclass
class ExecutedQuery:
    """Response of one `Client.execute` call.
    """
    rows: list[Any] = field(default_factory=list)
    fields: list[Field] = field(default_factory=list)
    rows_affected: int | str | None = None
    insert_id: int | str | None = None
    size: int = 0
    time: float = 0.0
    error: Any = None


def response_value(response: Any, *names: str, default: Any = None) -> Any:
    """Read the first present attribute or key of `names` from a response.

    Clients may answer with an object (`ExecutedQuery`) or with a plain
    mapping using the service's camelCase keys.
    """
    for name in names:
        if isinstance(response, Mapping):
            if response.get(name) is not None:
                return response[name]
        elif getattr(response, name, None) is not None:
            return getattr(response, name)
    return default


def _error_message(error: Any) -> str:
    if isinstance(error, Mapping):
        return str(error.get('message') or error)
    return str(getattr(error, 'message', None) or error)


def raise_for_error(response: Any) -> None:
    """Raise an error embedded in a client response.

    Raises
        The embedded exception itself, or ExecutionError carrying a
        non-exception payload in `body`
    """
    error = response_value(response, 'error')
    if not error:
        return
    logger.debug(f'Execution client returned an embedded error: {error!r}')
    if isinstance(error, BaseException):
        raise error
    raise ExecutionError(_error_message(error), body=error)


def connect(options: 'DialectOptions') -> Client:
    """Create a new execution client from the dialect options.

    Clients connect lazily, so this performs no network I/O.
    """
    client = options.client_factory(options.client_config())
    logger.debug(f'Created execution client {type(client).__name__} for {options.host or "url"}')
    return client
