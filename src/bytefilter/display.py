"""Labeled dumps of raw file contents."""

import os
import sys
from typing import BinaryIO, TextIO

from .config import BUFFER_SIZE
from .errors import describe

PRE_LABEL = "pre-transformation"
POST_LABEL = "post-transformation"


def _binary_stream(stream: TextIO) -> BinaryIO | TextIO:
    """Return the byte stream underlying a text stream, if it has one."""
    return getattr(stream, "buffer", stream)


def _write_chunk(stream: TextIO, chunk: bytes) -> None:
    target = _binary_stream(stream)
    if target is stream:
        # Plain text stream (e.g. StringIO): map bytes 1:1 onto code points
        stream.write(chunk.decode("latin-1"))
    else:
        target.write(chunk)  # type: ignore[arg-type]


def display(
    path: str,
    label: str,
    stream: TextIO | None = None,
    chunk_size: int = BUFFER_SIZE,
) -> bool:
    """Print the raw contents of a file under a labeled header.

    Failures are reported on stderr and never raised, so a missing or
    unreadable file does not stop the caller.

    Args:
        path: File to dump.
        label: Label shown in the header, e.g. "pre-transformation".
        stream: Output text stream (default: sys.stdout).
        chunk_size: Bytes read per call.

    Returns:
        True if the whole file was dumped, False on any error.
    """
    out = stream if stream is not None else sys.stdout

    # os.open succeeds on directories; the read then fails with EISDIR
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as e:
        print(f"Failed to open file for displaying contents: {describe(e)}", file=sys.stderr)
        return False

    error: OSError | None = None
    try:
        print(f"Contents of {path} ({label}):", file=out)
        out.flush()

        try:
            while True:
                chunk = os.read(fd, chunk_size)
                if not chunk:
                    break
                _write_chunk(out, chunk)
        except OSError as e:
            error = e

        _binary_stream(out).flush()
        print(file=out)
    finally:
        os.close(fd)

    if error is not None:
        print(f"Failed to read file: {describe(error)}", file=sys.stderr)
        return False
    return True
