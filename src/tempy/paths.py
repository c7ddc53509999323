"""Temporary path generation and materialization.

This module composes unique paths under the root temporary directory and
creates temporary directories. Nothing here removes what it creates; see
``tempy.tasks`` for scoped cleanup.
"""

import logging
import os
import secrets

from pydantic import ValidationError

from . import config
from .exceptions import InvalidOptionsError
from .types import DirectoryOptions, FileOptions

logger = logging.getLogger(__name__)


def get_path(prefix: str = "", root: str | None = None) -> str:
    """Generate a unique path under the root temporary directory.

    No file or directory is created.

    Args:
        prefix: Prepended to the random part of the final path segment
        root: Parent directory (defaults to the configured root temporary directory)

    Returns:
        Path string ending in ``prefix`` followed by 128 lowercase hex characters
    """
    if root is None:
        root = config.root_temporary_directory
    return os.path.join(root, prefix + secrets.token_hex(config.RANDOM_BYTES))


def format_extension(extension: str | None) -> str:
    """Turn an extension option into a filename suffix.

    Only a single leading dot is stripped, so ``"png"`` and ``".png"`` both
    give ``".png"`` while ``"..png"`` gives ``"..png"``.

    Args:
        extension: Extension with or without a leading dot, or None

    Returns:
        Suffix to append, or an empty string when extension is None
    """
    if extension is None:
        return ""
    if extension.startswith("."):
        extension = extension[1:]
    return f".{extension}"


def resolve_file_options(
    options: FileOptions | None = None,
    *,
    name: str | None = None,
    extension: str | None = None,
) -> FileOptions:
    """
    Validate file options given either as a model or as keyword arguments.

    Raises:
        InvalidOptionsError: If both forms are used, if the values have the wrong
            type, or if ``name`` and ``extension`` are both supplied.
    """
    raw = {"name": name, "extension": extension}
    if options is not None:
        if name is not None or extension is not None:
            raise InvalidOptionsError(
                "Pass either `options` or `name`/`extension` keywords, not both",
                raw,
            )
        return options

    try:
        return FileOptions(**raw)
    except ValidationError as e:
        raise InvalidOptionsError(_describe_validation_error(e), raw) from e


def resolve_directory_options(
    options: DirectoryOptions | None = None,
    *,
    prefix: str | None = None,
) -> DirectoryOptions:
    """
    Validate directory options given either as a model or as keyword arguments.

    Raises:
        InvalidOptionsError: If both forms are used or the prefix is not a string.
    """
    raw = {"prefix": prefix}
    if options is not None:
        if prefix is not None:
            raise InvalidOptionsError(
                "Pass either `options` or the `prefix` keyword, not both", raw
            )
        return options

    try:
        return DirectoryOptions() if prefix is None else DirectoryOptions(prefix=prefix)
    except ValidationError as e:
        raise InvalidOptionsError(_describe_validation_error(e), raw) from e


def _describe_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        message = detail["msg"].removeprefix("Value error, ")
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def temporary_directory(
    *,
    prefix: str | None = None,
    options: DirectoryOptions | None = None,
) -> str:
    """Create a new temporary directory and return its path.

    The directory is created directly under the root temporary directory,
    which must already exist.

    Args:
        prefix: Prepended to the random directory name
        options: Pre-built DirectoryOptions, instead of ``prefix``

    Returns:
        Path of the created directory

    Raises:
        InvalidOptionsError: If the options are invalid
        OSError: If the directory cannot be created
    """
    resolved = resolve_directory_options(options, prefix=prefix)
    directory = get_path(resolved.prefix)
    os.mkdir(directory)
    logger.debug("Created temporary directory: %s", directory)
    return directory


def temporary_file(
    *,
    name: str | None = None,
    extension: str | None = None,
    options: FileOptions | None = None,
) -> str:
    """Get a temporary file path you can write to.

    Only a path is returned; the file itself is not created. When ``name`` is
    given, a fresh temporary directory is created to hold the file so the
    exact name can be used without collisions.

    Args:
        name: Exact file name. Mutually exclusive with ``extension``.
        extension: File extension, with or without a leading dot.
            Mutually exclusive with ``name``.
        options: Pre-built FileOptions, instead of the keywords

    Returns:
        Path of the temporary file

    Raises:
        InvalidOptionsError: If ``name`` and ``extension`` are both supplied,
            or the options are otherwise invalid
        OSError: If the directory for a named file cannot be created
    """
    resolved = resolve_file_options(options, name=name, extension=extension)

    if resolved.name:
        return os.path.join(temporary_directory(), resolved.name)

    return get_path() + format_extension(resolved.extension)
