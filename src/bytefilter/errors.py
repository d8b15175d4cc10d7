"""Exceptions raised by the filter pipeline."""

VALID_FILTERS_HINT = "Choose from 'upper', 'lower', or 'null'."


def describe(error: BaseException | None) -> str:
    """Return a short, errno-style description of an error.

    Args:
        error: The underlying exception, if any.

    Returns:
        The OS error description (``strerror``) when available, otherwise the
        exception text.
    """
    if error is None:
        return ""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    if isinstance(error, MemoryError):
        return "Cannot allocate memory"
    return str(error)


class ByteFilterError(Exception):
    """Base class for all bytefilter errors."""


class InvalidFilterError(ByteFilterError):
    """Raised when a filter name does not match any known filter."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid filter: {name}. {VALID_FILTERS_HINT}")


class TransformError(ByteFilterError):
    """Unrecoverable I/O or allocation failure during transformation.

    Attributes:
        context: Short description of the failed operation.
        cause: The underlying exception, if any.
    """

    def __init__(self, context: str, cause: BaseException | None = None) -> None:
        self.context = context
        self.cause = cause
        super().__init__(context)

    def __str__(self) -> str:
        reason = describe(self.cause)
        if reason:
            return f"{self.context}: {reason}"
        return self.context


class ShortWriteError(TransformError):
    """Raised when fewer bytes were written than were read."""

    def __init__(self, context: str, expected: int, written: int) -> None:
        self.expected = expected
        self.written = written
        super().__init__(context)

    def __str__(self) -> str:
        return f"{self.context}: wrote {self.written} of {self.expected} bytes"


class ConfigError(ByteFilterError):
    """Raised when a settings file is invalid."""
