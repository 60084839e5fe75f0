"""
Storage errors for the Q&A bounded context.

Every store implementation raises one of these, whatever its backend.
The application layer maps them to handler errors; it never needs
to know which driver produced the failure.
No framework imports allowed.
"""


class StoreError(Exception):
    """Base error for all store failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidIdentifierError(StoreError):
    """Raised when a supplied identifier does not denote a usable record.

    Covers both a string that is not a well-formed UUID and a reference
    the store rejected for violating referential integrity (an answer
    pointing at a question that does not exist).
    """


class StoreOperationError(StoreError):
    """Raised for any other store failure.

    The original exception is kept on ``cause`` so it can be logged.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause

    def __repr__(self) -> str:
        return f"StoreOperationError(cause={self.cause!r})"
