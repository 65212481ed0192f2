"""Package-wide error definitions."""


class PolykitError(Exception):
    """Base class for all polykit errors."""


class NotAContainerError(PolykitError, TypeError):
    """Raised when a value is neither a mapping nor an attribute record.

    Inherits from `TypeError` so callers that only care about "wrong kind of
    value" can catch the builtin.
    """

    def __init__(self, value: object, operation: str | None = None) -> None:
        kind = type(value).__name__
        if operation is None:
            message = f"Not a mapping or record: {kind}"
        else:
            message = f"Cannot {operation} on a value of type {kind}: not a mapping or record"
        super().__init__(message)
        self.value = value
        self.operation = operation
