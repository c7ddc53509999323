"""Scoped tasks: run a callback against a temporary path, then remove it.

Every task follows the same lifecycle. The path is produced, the callback
runs, and the path is removed whether the callback returned or raised. The
caller always sees the callback's own outcome; cleanup failures are only
logged.
"""

import asyncio
import inspect
import logging

from .core import remove_path_with_retries
from .paths import temporary_directory, temporary_file
from .types import (
    DirectoryOptions,
    FileOptions,
    ReturnValueType,
    TaskCallback,
    WriteContent,
)
from .writer import temporary_write

logger = logging.getLogger(__name__)


async def run_task(
    temporary_path: str,
    callback: TaskCallback[ReturnValueType],
) -> ReturnValueType:
    """
    Invoke ``callback`` with ``temporary_path`` and remove the path afterwards.

    The callback may be a plain function or return an awaitable. Removal is
    recursive, ignores a missing path, and retries transient failures. It is
    shielded from cancellation so that it runs to completion once started.

    Parameters:
        temporary_path (str): Path owned by the task for the callback's duration.
        callback: Receives the path; its result is returned.

    Returns:
        Whatever the callback returned (awaited if needed).

    Raises:
        Exception: Whatever the callback raised. Cleanup errors never surface.
    """
    try:
        result = callback(temporary_path)
        if inspect.isawaitable(result):
            result = await result
        return result
    finally:
        await asyncio.shield(remove_path_with_retries(temporary_path))


async def temporary_file_task(
    callback: TaskCallback[ReturnValueType],
    *,
    name: str | None = None,
    extension: str | None = None,
    options: FileOptions | None = None,
) -> ReturnValueType:
    """Run ``callback`` with a temporary file path, then remove the file.

    When ``name`` is given the containing temporary directory is not removed,
    only the path handed to the callback.

    Raises:
        InvalidOptionsError: If the file options are invalid (callback not run)
    """
    return await run_task(
        temporary_file(name=name, extension=extension, options=options), callback
    )


async def temporary_directory_task(
    callback: TaskCallback[ReturnValueType],
    *,
    prefix: str | None = None,
    options: DirectoryOptions | None = None,
) -> ReturnValueType:
    """Run ``callback`` with a new temporary directory, then remove the directory tree."""
    return await run_task(temporary_directory(prefix=prefix, options=options), callback)


async def temporary_write_task(
    content: WriteContent,
    callback: TaskCallback[ReturnValueType],
    *,
    name: str | None = None,
    extension: str | None = None,
    options: FileOptions | None = None,
) -> ReturnValueType:
    """Write ``content`` to a temporary file, run ``callback`` with its path, then remove it.

    If writing fails the callback is not run and the partial file is not
    removed.
    """
    file_path = await temporary_write(
        content, name=name, extension=extension, options=options
    )
    return await run_task(file_path, callback)
