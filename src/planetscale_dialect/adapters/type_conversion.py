"""
Type conversion between the execution service's wire values and Python.

Two directions are handled here:

1. Wire -> Python: `cast` is the default per-field rule applied while the
   execution client decodes rows. `inflate_dates` wraps it so that
   DATETIME and TIMESTAMP columns come back as timezone-aware datetimes.
2. Python -> wire: `convert_params` renders datetime parameters in the
   literal format the service expects embedded in SQL text.

Usage:
    # Decode one field
    value = inflate_dates(Field('created_at', 'DATETIME'), '2024-01-15 10:30:00')

    # Encode outgoing parameters
    params = convert_params(compiled_query.parameters)
"""
import datetime
import decimal
import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

import dateutil.parser
from planetscale_dialect.adapters.column_info import Field
from planetscale_dialect.exceptions import TypeConversionError

logger = logging.getLogger(__name__)

__all__ = [
    'cast',
    'inflate_dates',
    'format_date',
    'convert_params',
    'INTEGER_TYPES',
    'FLOAT_TYPES',
    'BINARY_TYPES',
    'DATETIME_TYPES',
]

INTEGER_TYPES: frozenset[str] = frozenset({
    'INT8', 'INT16', 'INT24', 'INT32', 'INT64',
    'UINT8', 'UINT16', 'UINT24', 'UINT32', 'UINT64',
    'YEAR',
})
FLOAT_TYPES: frozenset[str] = frozenset({'FLOAT32', 'FLOAT64'})
BINARY_TYPES: frozenset[str] = frozenset({'BLOB', 'BINARY', 'VARBINARY', 'BIT', 'GEOMETRY'})
DATETIME_TYPES: frozenset[str] = frozenset({'DATETIME', 'TIMESTAMP'})


def _type_name(field: Any) -> str:
    """Read the type tag from a Field, a mapping, or a bare tag string."""
    if isinstance(field, str):
        return field.upper()
    if isinstance(field, Field):
        return field.type_name
    if isinstance(field, Mapping):
        return str(field.get('type') or '').upper()
    return str(getattr(field, 'type', '') or '').upper()


def cast(field: Any, value: str | None) -> Any:
    """Default conversion of a raw wire value for one column.

    Integers, floats, decimals, JSON and binary columns are converted; text
    and temporal columns are returned as the wire string. None passes through.
    """
    if value is None:
        return None

    type_name = _type_name(field)
    try:
        if type_name in INTEGER_TYPES:
            return int(value)
        if type_name in FLOAT_TYPES:
            return float(value)
        if type_name == 'DECIMAL':
            return decimal.Decimal(value)
        if type_name == 'JSON':
            return json.loads(value)
        if type_name in BINARY_TYPES:
            return value if isinstance(value, bytes) else value.encode('latin-1')
    except (ValueError, ArithmeticError, UnicodeEncodeError) as e:
        raise TypeConversionError(f'Cannot convert {value!r} for {type_name} column: {e}') from e
    return value


def inflate_dates(field: Any, value: str | None) -> Any:
    """Convert DATETIME and TIMESTAMP values to datetime objects.

    This is the default cast passed to the execution client; supplying a
    `cast` in the dialect options replaces it entirely. Values without a
    zone designator are taken to be UTC. Values that cannot be represented
    as a datetime, such as the zero date, are returned as the wire string.

    >>> inflate_dates('DATETIME', '2024-01-15 10:30:00')
    datetime.datetime(2024, 1, 15, 10, 30, tzinfo=datetime.timezone.utc)
    >>> inflate_dates('INT32', '7')
    7
    """
    if _type_name(field) in DATETIME_TYPES and value:
        try:
            parsed = dateutil.parser.isoparse(value)
        except (ValueError, OverflowError) as e:
            logger.warning(f'Keeping unparseable {_type_name(field)} value {value!r} as text: {e}')
            return value
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=datetime.timezone.utc)
        return parsed
    return cast(field, value)


def format_date(value: datetime.datetime) -> str:
    """Render a datetime as a database datetime string in UTC.

    Naive datetimes are assumed to already be in UTC.

    >>> format_date(datetime.datetime(2024, 1, 15, 10, 30, 0, 123000))
    '2024-01-15 10:30:00.123000'
    >>> format_date(datetime.datetime(2024, 1, 15, 10, 30))
    '2024-01-15 10:30:00.000000'
    """
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.replace(tzinfo=None).isoformat(sep=' ', timespec='microseconds')


def convert_params(parameters: Iterable[Any]) -> tuple[Any, ...]:
    """Format datetime parameters; everything else passes through unchanged."""
    return tuple(format_date(p) if isinstance(p, datetime.datetime) else p
                 for p in parameters)
