"""
Dialect-specific exception classes.
"""
from typing import Any


class DatabaseError(Exception):
    """Base class for all dialect errors.
    """


class ExecutionError(DatabaseError):
    """The remote service rejected a statement.

    `body` holds the service's own error payload when one was reported.
    """

    def __init__(self, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.body = body


class TransactionStateError(DatabaseError):
    """Commit or rollback requested with no open transaction.
    """


class UnsupportedOperationError(DatabaseError):
    """Operation the serverless driver cannot provide.
    """


class TypeConversionError(DatabaseError):
    """Error converting types between Python and the wire format.
    """
