"""
Column metadata handed to cast functions while decoding rows.
"""
from dataclasses import dataclass

__all__ = ['Field']


@dataclass(frozen=True)
class Field:
    """Metadata for a single result column as reported by the execution client.

    Only `name` and `type` are relied upon; the remaining attributes are kept
    for custom cast functions that need them.
    """
    name: str
    type: str
    table: str | None = None
    org_table: str | None = None
    database: str | None = None
    org_name: str | None = None
    column_length: int | None = None
    charset: int | None = None
    flags: int | None = None

    @property
    def type_name(self) -> str:
        return (self.type or '').upper()
