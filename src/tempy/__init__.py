"""tempy - Get a random temporary file or directory path.

This package hands out uniquely named paths under the system temporary
directory, optionally creates or writes them, and can run a callback against
such a path and clean it up afterwards.

Example:
    ```python
    import asyncio
    from tempy import temporary_directory_task, temporary_file, temporary_write

    # Just a path, nothing created
    path = temporary_file(extension="png")

    # Written file
    path = asyncio.run(temporary_write("unicorn", name="unicorn.txt"))

    # Scoped directory, removed once the callback finishes
    async def build(directory: str) -> int:
        ...

    result = asyncio.run(temporary_directory_task(build, prefix="build_"))
    ```

Error Handling:
    Invalid options raise ``InvalidOptionsError`` before anything touches disk:
    ```python
    from tempy import InvalidOptionsError, temporary_file

    try:
        temporary_file(name="report.md", extension="md")
    except InvalidOptionsError as e:
        print(e)
    ```

Logging:
    To enable debug logging in your application:
    ```python
    import logging
    logging.getLogger('tempy').setLevel(logging.DEBUG)
    ```
"""

import logging

from .config import root_temporary_directory
from .exceptions import ConfigurationError, InvalidOptionsError, TempyError
from .paths import temporary_directory, temporary_file
from .tasks import (
    run_task,
    temporary_directory_task,
    temporary_file_task,
    temporary_write_task,
)
from .types import DirectoryOptions, FileOptions, TaskCallback
from .writer import temporary_write, temporary_write_sync

# Configure module-level logger
logger = logging.getLogger(__name__)
# Use NullHandler by default - consuming applications configure as needed
logger.addHandler(logging.NullHandler())

# Get version from package metadata (single source of truth in pyproject.toml)
try:
    from importlib.metadata import version

    __version__ = version("tempy")
except Exception:
    # Fallback for development environments where package isn't installed
    __version__ = "0.0.0.dev"

__all__ = [
    # Paths
    "temporary_file",
    "temporary_directory",
    "root_temporary_directory",
    # Writing
    "temporary_write",
    "temporary_write_sync",
    # Scoped tasks
    "run_task",
    "temporary_file_task",
    "temporary_directory_task",
    "temporary_write_task",
    # Types
    "FileOptions",
    "DirectoryOptions",
    "TaskCallback",
    # Errors
    "TempyError",
    "InvalidOptionsError",
    "ConfigurationError",
]
