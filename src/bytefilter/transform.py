"""File transformation strategies.

Two strategies are used depending on whether the output path string equals
the input path string:

- distinct paths: stream the input in chunks, filtering and writing each
  chunk as it is read
- identical path: read the whole file into memory first, then truncate the
  file and write the filtered buffer back, so that no byte is overwritten
  before it has been read

All failures are raised as TransformError with the file handles already
closed.
"""

import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, Literal

from .config import BUFFER_SIZE, FILE_PERMISSIONS, FilterConfig
from .errors import ShortWriteError, TransformError
from .filters import ByteFilter

log = logging.getLogger(__name__)


@dataclass
class TransformResult:
    """Summary of a completed transformation.

    Attributes:
        mode: Strategy used ("distinct" or "identical").
        bytes_read: Total bytes read from the input.
        bytes_written: Total bytes written to the output.
    """

    mode: Literal["distinct", "identical"]
    bytes_read: int
    bytes_written: int


def _open_input(path: str) -> BinaryIO:
    try:
        return open(path, "rb", buffering=0)
    except OSError as e:
        raise TransformError("Failed to open input file", e) from e


def _open_output(path: str, flags: int, mode: int) -> BinaryIO:
    """Open ``path`` for unbuffered writing so short writes are observable."""
    fd = os.open(path, flags, mode)
    return os.fdopen(fd, "wb", buffering=0)


def transform_distinct(
    input_path: str,
    output_path: str,
    byte_filter: ByteFilter,
    chunk_size: int = BUFFER_SIZE,
    file_mode: int = FILE_PERMISSIONS,
) -> TransformResult:
    """Stream ``input_path`` through ``byte_filter`` into ``output_path``.

    The output file is created if needed and truncated.

    Raises:
        TransformError: If a file cannot be opened, read or written.
    """
    total_read = 0
    total_written = 0
    chunks = 0

    with _open_input(input_path) as src:
        try:
            dst = _open_output(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, file_mode)
        except OSError as e:
            raise TransformError("Failed to create output file", e) from e

        with dst:
            while True:
                try:
                    chunk = src.read(chunk_size)
                except OSError as e:
                    raise TransformError("Failed to read input file", e) from e
                if not chunk:
                    break

                total_read += len(chunk)
                filtered = byte_filter.apply(chunk)
                try:
                    written = dst.write(filtered) or 0
                except OSError as e:
                    raise TransformError("Failed to write to output file", e) from e
                if written != len(filtered):
                    raise ShortWriteError("Failed to write to output file", len(filtered), written)
                total_written += written
                chunks += 1

    log.debug(f"Streamed {total_read} bytes in {chunks} chunk(s) to {output_path}")
    return TransformResult(mode="distinct", bytes_read=total_read, bytes_written=total_written)


def _read_all(src: BinaryIO, chunk_size: int) -> bytearray:
    """Read a whole file into a buffer, doubling its capacity as needed.

    Returns:
        Buffer trimmed to the number of bytes actually read.
    """
    buffer = bytearray(chunk_size)
    length = 0
    while True:
        if len(buffer) - length < chunk_size:
            buffer.extend(bytes(len(buffer)))
        with memoryview(buffer) as view, view[length : length + chunk_size] as window:
            count = src.readinto(window)  # type: ignore[attr-defined]
        if not count:
            break
        length += count

    del buffer[length:]
    return buffer


def transform_in_place(
    path: str,
    byte_filter: ByteFilter,
    chunk_size: int = BUFFER_SIZE,
    file_mode: int = FILE_PERMISSIONS,
) -> TransformResult:
    """Filter ``path`` in place via an in-memory copy of the whole file.

    The file is reopened without O_CREAT; it has just been read, so it
    exists.

    Raises:
        TransformError: If the file cannot be read, buffered or rewritten.
    """
    with _open_input(path) as src:
        try:
            buffer = _read_all(src, chunk_size)
        except MemoryError as e:
            raise TransformError("Failed to allocate memory while reading", e) from e
        except OSError as e:
            raise TransformError("Failed to read input file", e) from e

    total = len(buffer)
    log.debug(f"Buffered {total} bytes from {path}")
    byte_filter.apply_in_place(buffer)

    try:
        dst = _open_output(path, os.O_WRONLY | os.O_TRUNC, file_mode)
    except OSError as e:
        raise TransformError("Failed to open output file", e) from e

    with dst:
        try:
            written = dst.write(buffer) or 0
        except OSError as e:
            raise TransformError("Failed to write transformed content to file", e) from e
        if written != total:
            raise ShortWriteError("Failed to write transformed content to file", total, written)

    return TransformResult(mode="identical", bytes_read=total, bytes_written=written)


def run_transform(config: FilterConfig, byte_filter: ByteFilter) -> TransformResult:
    """Transform according to ``config``, choosing the strategy by path equality."""
    if config.same_path:
        log.debug(f"Input and output are both {config.input_path}; buffering whole file")
        return transform_in_place(
            config.input_path,
            byte_filter,
            chunk_size=config.chunk_size,
            file_mode=config.file_mode,
        )

    log.debug(f"Streaming {config.input_path} -> {config.output_path}")
    return transform_distinct(
        config.input_path,
        config.output_path,
        byte_filter,
        chunk_size=config.chunk_size,
        file_mode=config.file_mode,
    )
