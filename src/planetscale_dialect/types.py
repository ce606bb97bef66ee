"""
Value objects exchanged with the query-building layer.

- CompiledQuery: SQL text plus ordered positional parameters
- QueryResult: rows plus optional affected-row count and insert id
"""
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Self

__all__ = ['CompiledQuery', 'QueryResult']


@dataclass(frozen=True)
class CompiledQuery:
    """Immutable compiled statement.
    """
    sql: str
    parameters: tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.parameters, tuple):
            object.__setattr__(self, 'parameters', tuple(self.parameters))

    @classmethod
    def raw(cls, sql: str, parameters: Sequence[Any] = ()) -> Self:
        return cls(sql, tuple(parameters))


@dataclass
class QueryResult:
    """Result of one executed statement.

    `num_affected_rows` is None when the client reported no count.
    """
    rows: list[Any] = field(default_factory=list)
    num_affected_rows: int | None = None
    insert_id: int | None = None
