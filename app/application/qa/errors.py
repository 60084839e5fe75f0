"""
Handler-facing errors for the Q&A bounded context.

These are the only failures the transport layer ever sees.
They are mapped to HTTP responses in app.shared.errors.handlers.
"""

DEFAULT_INTERNAL_ERROR_MESSAGE = "Something went wrong! Please try again."


class HandlerError(Exception):
    """Base error for all request handler failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class BadRequestError(HandlerError):
    """Raised when the caller can correct the request (HTTP 400)."""


class InternalError(HandlerError):
    """Raised for opaque failures (HTTP 500).

    Defaults to a fixed message that leaks nothing about the store.
    """

    def __init__(self, message: str = DEFAULT_INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)
