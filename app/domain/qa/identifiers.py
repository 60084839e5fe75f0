"""
Identifier validation.

Identifiers arrive as strings from callers. They are parsed here,
before any store access, so a malformed value never costs a round trip.
"""

from uuid import UUID

from app.domain.qa.errors import InvalidIdentifierError


def parse_identifier(value: str, message: str) -> UUID:
    """Parse a caller-supplied identifier into a UUID.

    Args:
        value: The raw identifier string.
        message: Error message to raise with when parsing fails.

    Returns:
        The parsed UUID.

    Raises:
        InvalidIdentifierError: If ``value`` is not a well-formed UUID.
    """
    if not isinstance(value, str):
        raise InvalidIdentifierError(message)
    try:
        return UUID(value)
    except ValueError:
        raise InvalidIdentifierError(message) from None
