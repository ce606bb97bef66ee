"""
Compile SQLAlchemy Core statements into CompiledQuery values.

The execution client takes MySQL text with `?` placeholders and a list of
positional values, so statements are compiled with SQLAlchemy's MySQL dialect
in `qmark` paramstyle and their bind values flattened in placeholder order.

Usage:
    users = sa.table('users', sa.column('id'), sa.column('name'))
    compiled = QueryCompiler().compile(sa.select(users).where(users.c.id == 5))
    # CompiledQuery(sql='SELECT users.id, users.name \\nFROM users \\nWHERE users.id = ?',
    #               parameters=(5,))
"""
import logging
from collections.abc import Sequence
from typing import Any

from planetscale_dialect.types import CompiledQuery
from sqlalchemy.dialects import mysql
from sqlalchemy.sql.expression import ClauseElement

logger = logging.getLogger(__name__)

__all__ = ['QueryCompiler']


class QueryCompiler:
    """MySQL statement compiler producing positional parameters.
    """

    def __init__(self) -> None:
        self.dialect = mysql.dialect(paramstyle='qmark')

    def compile(self, statement: ClauseElement | str,
                parameters: Sequence[Any] = ()) -> CompiledQuery:
        """Compile a Core statement, or wrap raw SQL text with its parameters.
        """
        if isinstance(statement, str):
            return CompiledQuery.raw(statement, parameters)

        compiled = statement.compile(dialect=self.dialect,
                                     compile_kwargs={'render_postcompile': True})
        params = compiled.params
        values = tuple(params[name] for name in (compiled.positiontup or ()))
        logger.debug(f'Compiled statement with {len(values)} parameters')
        return CompiledQuery(str(compiled), values)
