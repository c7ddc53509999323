"""Type definitions for tempy."""

from collections.abc import AsyncIterable, Awaitable, Callable, Iterable
from typing import IO, Any, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

ReturnValueType = TypeVar("ReturnValueType")

MUTUALLY_EXCLUSIVE_MESSAGE = "The `name` and `extension` options are mutually exclusive"

# Callback receiving the temporary path; may return a value or an awaitable
TaskCallback = Callable[[str], Awaitable[ReturnValueType] | ReturnValueType]

# Content that is written in a single call (text or any buffer-protocol object)
BufferContent = str | bytes | bytearray | memoryview

# Content that is consumed chunk by chunk
StreamContent = AsyncIterable[str | bytes] | Iterable[str | bytes] | IO[Any]

WriteContent = BufferContent | StreamContent


class FileOptions(BaseModel):
    """Options for temporary file paths.

    ``name`` and ``extension`` are mutually exclusive. You usually won't need
    either; specify them only when a consumer cares about the file name.

    Attributes:
        name: Exact file name, placed inside a fresh temporary directory
        extension: File extension, with or without a leading dot
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str | None = None
    extension: str | None = None

    @model_validator(mode="after")
    def _check_mutually_exclusive(self) -> "FileOptions":
        # An empty extension still counts as supplied
        if self.name and self.extension is not None:
            raise ValueError(MUTUALLY_EXCLUSIVE_MESSAGE)
        return self


class DirectoryOptions(BaseModel):
    """Options for temporary directories.

    Attributes:
        prefix: Prepended to the random directory name. Useful in tests to
            make the created directories easy to spot.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    prefix: str = ""
