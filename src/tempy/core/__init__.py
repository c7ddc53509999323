"""Core modules for tempy.

This package contains the cleanup machinery behind scoped tasks: path
removal and the retry policy for transient removal failures.
"""

from .cleanup import (
    detect_transient_removal_failure,
    remove_path,
    remove_path_with_retries,
)

__all__ = [
    "detect_transient_removal_failure",
    "remove_path",
    "remove_path_with_retries",
]
