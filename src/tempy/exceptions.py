"""Exception classes for tempy."""

from __future__ import annotations

from typing import Any


class TempyError(Exception):
    """Base exception for all tempy errors."""

    pass


class InvalidOptionsError(TempyError):
    """Raised when path options are invalid or conflict with each other.

    The most common cause is passing both ``name`` and ``extension`` to a
    file-path operation. The check happens before any disk I/O, so nothing
    is created when this is raised.

    Attributes:
        options: The raw options that failed validation

    Example:
        ```python
        from tempy import InvalidOptionsError, temporary_file

        try:
            temporary_file(name="report.md", extension="txt")
        except InvalidOptionsError as e:
            print(f"Bad options {e.options}: {e}")
        ```
    """

    def __init__(self, message: str, options: dict[str, Any] | None = None):
        """Initialize InvalidOptionsError.

        Args:
            message: Human readable description of the problem
            options: The raw options that failed validation
        """
        super().__init__(message)
        self.options = options or {}


class ConfigurationError(TempyError):
    """Raised when the root temporary directory cannot be resolved."""

    pass
