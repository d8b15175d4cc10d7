"""Byte-by-byte file filters with before/after content dumps."""

from .cli import main
from .config import BUFFER_SIZE, FILE_PERMISSIONS, MAX_CHUNK_SIZE, FilterConfig, Settings
from .display import POST_LABEL, PRE_LABEL, display
from .errors import (
    ByteFilterError,
    ConfigError,
    InvalidFilterError,
    ShortWriteError,
    TransformError,
)
from .filters import FILTER_NAMES, ByteFilter, resolve_filter
from .transform import TransformResult, run_transform, transform_distinct, transform_in_place

__all__ = [
    "ByteFilter",
    "FILTER_NAMES",
    "resolve_filter",
    "FilterConfig",
    "Settings",
    "BUFFER_SIZE",
    "FILE_PERMISSIONS",
    "MAX_CHUNK_SIZE",
    "display",
    "PRE_LABEL",
    "POST_LABEL",
    "TransformResult",
    "run_transform",
    "transform_distinct",
    "transform_in_place",
    "ByteFilterError",
    "ConfigError",
    "InvalidFilterError",
    "ShortWriteError",
    "TransformError",
    "main",
]
