"""Utility modules for tempy.

This package contains the file writing helpers shared by the sync and async
writers.
"""

from .file_utils import (
    is_buffer,
    is_stream,
    to_bytes,
    write_buffer,
    write_stream,
)

__all__ = [
    "is_buffer",
    "is_stream",
    "to_bytes",
    "write_buffer",
    "write_stream",
]
