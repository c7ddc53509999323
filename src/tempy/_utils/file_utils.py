"""File utilities for tempy.

This module provides the low-level writers used by ``tempy.writer``: one-shot
buffer writes and chunked stream consumption.
"""

import asyncio
import logging
from collections.abc import AsyncIterable, Iterable
from typing import Any

logger = logging.getLogger(__name__)

# Read size for file-like sources
CHUNK_SIZE = 64 * 1024


def is_buffer(content: Any) -> bool:
    """Return True for content that is written in a single call.

    That is text, or any object supporting the buffer protocol (bytes,
    array.array, mmap, numpy arrays, ...).
    """
    if isinstance(content, str):
        return True
    try:
        with memoryview(content):
            return True
    except TypeError:
        return False


def is_stream(content: Any) -> bool:
    """Return True for content that ``write_stream`` can consume."""
    return (
        callable(getattr(content, "read", None))
        or isinstance(content, AsyncIterable)
        or isinstance(content, Iterable)
    )


def to_bytes(chunk: Any) -> bytes:
    """
    Convert a content chunk to bytes.

    Text is encoded as UTF-8; buffer-protocol objects are copied as raw bytes.

    Raises:
        TypeError: If the chunk is neither text nor bytes-like.
    """
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    try:
        view = memoryview(chunk)
    except TypeError:
        raise TypeError(
            f"Expected str or bytes-like chunk, got {type(chunk).__name__}"
        ) from None
    with view:
        return bytes(view)


def write_buffer(file_path: str, content: Any) -> None:
    """Write in-memory content to ``file_path`` in one call, replacing any existing file."""
    with open(file_path, "wb") as handle:
        handle.write(to_bytes(content))


def _copy_file_object(file_path: str, source: Any) -> None:
    with open(file_path, "wb") as handle:
        while chunk := source.read(CHUNK_SIZE):
            handle.write(to_bytes(chunk))


def _write_chunks(file_path: str, chunks: Iterable[Any]) -> None:
    with open(file_path, "wb") as handle:
        for chunk in chunks:
            handle.write(to_bytes(chunk))


async def write_stream(file_path: str, source: Any) -> None:
    """
    Consume a streaming source to completion, writing each chunk to ``file_path``.

    Supported sources are readable file objects (binary or text), async
    iterables of chunks, and sync iterables of chunks. Blocking reads and
    writes run in a worker thread.

    Any exception raised by the source propagates unchanged. The partially
    written file is left on disk.

    Parameters:
        file_path (str): Destination file path.
        source: The streaming source.

    Raises:
        TypeError: If ``source`` is not a supported stream, or yields a chunk
            that is neither text nor bytes-like.
        OSError: If the file cannot be opened or written.
    """
    if callable(getattr(source, "read", None)):
        await asyncio.to_thread(_copy_file_object, file_path, source)
    elif isinstance(source, AsyncIterable):
        handle = await asyncio.to_thread(open, file_path, "wb")
        try:
            async for chunk in source:
                await asyncio.to_thread(handle.write, to_bytes(chunk))
        finally:
            await asyncio.to_thread(handle.close)
    elif isinstance(source, Iterable):
        await asyncio.to_thread(_write_chunks, file_path, source)
    else:
        raise TypeError(f"Unsupported content type: {type(source).__name__}")

    logger.debug("Finished writing stream to: %s", file_path)
