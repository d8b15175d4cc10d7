"""Byte filters and filter name resolution.

Each filter maps one byte to exactly one byte, so applying a filter never
changes the length of the data. Filters are applied through 256-entry
translation tables, which keeps per-byte dispatch out of the hot loop.
"""

import string
from enum import Enum

_LOWER = string.ascii_lowercase.encode("ascii")
_UPPER = string.ascii_uppercase.encode("ascii")

_TABLES = {
    "upper": bytes.maketrans(_LOWER, _UPPER),
    "lower": bytes.maketrans(_UPPER, _LOWER),
    "null": bytes(range(256)),
}


class ByteFilter(Enum):
    """Named byte-to-byte transformations."""

    UPPER = "upper"  # ASCII lowercase -> uppercase
    LOWER = "lower"  # ASCII uppercase -> lowercase
    NULL = "null"  # Identity

    @property
    def table(self) -> bytes:
        """Translation table for ``bytes.translate``."""
        return _TABLES[self.value]

    def apply(self, data: bytes | bytearray) -> bytes:
        """Apply the filter to every byte of ``data``.

        Args:
            data: Bytes to transform.

        Returns:
            New bytes object of the same length.
        """
        return bytes(data.translate(self.table))

    def apply_in_place(self, buffer: bytearray) -> None:
        """Apply the filter to every byte of ``buffer``, modifying it."""
        buffer[:] = buffer.translate(self.table)

    def apply_byte(self, value: int) -> int:
        """Apply the filter to a single byte value (0-255)."""
        return self.table[value]


FILTER_NAMES: tuple[str, ...] = tuple(f.value for f in ByteFilter)


def resolve_filter(name: str) -> ByteFilter | None:
    """Look up a filter by its exact, case-sensitive name.

    Args:
        name: Filter name as given on the command line.

    Returns:
        The matching ByteFilter, or None if the name is unknown.
    """
    try:
        return ByteFilter(name)
    except ValueError:
        return None
