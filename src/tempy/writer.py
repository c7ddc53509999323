"""Write content to temporary files."""

import asyncio
import logging

from ._utils import is_buffer, is_stream, write_buffer, write_stream
from .paths import temporary_file
from .types import BufferContent, FileOptions, WriteContent

logger = logging.getLogger(__name__)


async def temporary_write(
    content: WriteContent,
    *,
    name: str | None = None,
    extension: str | None = None,
    options: FileOptions | None = None,
) -> str:
    """Write content to a new temporary file and return its path.

    Args:
        content: ``str``/``bytes``-like data written in one go, or a stream
            (readable file object, async iterable or iterable of chunks)
            consumed to completion
        name: Exact file name. Mutually exclusive with ``extension``.
        extension: File extension, with or without a leading dot
        options: Pre-built FileOptions, instead of the keywords

    Returns:
        Path of the written file

    Raises:
        TypeError: If ``content`` is neither in-memory data nor a stream.
            Nothing is created in that case.
        InvalidOptionsError: If the file options are invalid
        OSError: If the file cannot be written
        Exception: Whatever a failing stream raises. The partial file stays on disk.
    """
    buffered = is_buffer(content)
    if not buffered and not is_stream(content):
        raise TypeError(f"Unsupported content type: {type(content).__name__}")

    file_path = temporary_file(name=name, extension=extension, options=options)

    if buffered:
        await asyncio.to_thread(write_buffer, file_path, content)
    else:
        await write_stream(file_path, content)

    logger.debug("Wrote temporary file: %s", file_path)
    return file_path


def temporary_write_sync(
    content: BufferContent,
    *,
    name: str | None = None,
    extension: str | None = None,
    options: FileOptions | None = None,
) -> str:
    """Synchronously write in-memory content to a new temporary file.

    Same as ``temporary_write`` but blocking, and streams are not accepted.

    Raises:
        TypeError: If ``content`` is not ``str`` or bytes-like
        InvalidOptionsError: If the file options are invalid
        OSError: If the file cannot be written
    """
    if not is_buffer(content):
        raise TypeError(
            f"temporary_write_sync() needs str or bytes-like content, got {type(content).__name__}"
        )

    file_path = temporary_file(name=name, extension=extension, options=options)
    write_buffer(file_path, content)
    logger.debug("Wrote temporary file: %s", file_path)
    return file_path
