"""
Translation of driver failures into the store error taxonomy.

A foreign-key violation means the caller referenced a row that does
not exist, so it becomes InvalidIdentifierError. Everything else is
wrapped in StoreOperationError with the original exception kept,
including driver ValueErrors raised while binding parameters (NUL
bytes, unencodable surrogates) that SQLAlchemy does not wrap.
"""

from psycopg2 import errorcodes
from sqlalchemy.exc import DBAPIError

from app.domain.qa.errors import InvalidIdentifierError, StoreError, StoreOperationError


def is_foreign_key_violation(exc: Exception) -> bool:
    """Return True if the driver reported SQLSTATE 23503."""
    if not isinstance(exc, DBAPIError):
        return False
    return getattr(exc.orig, "pgcode", None) == errorcodes.FOREIGN_KEY_VIOLATION


def translate_store_error(
    exc: Exception, invalid_message: str | None = None
) -> StoreError:
    """Map a database or driver exception to a StoreError.

    Args:
        exc: The exception raised while talking to the database.
        invalid_message: Message for the InvalidIdentifierError raised on a
            foreign-key violation. Operations that cannot violate a foreign
            key pass None and always get StoreOperationError.

    Returns:
        The StoreError to raise in place of ``exc``.
    """
    if invalid_message is not None and is_foreign_key_violation(exc):
        return InvalidIdentifierError(invalid_message)
    return StoreOperationError(exc)
