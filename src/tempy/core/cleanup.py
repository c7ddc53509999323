"""Removal and retry logic for temporary paths.

Cleanup is best-effort: transient failures are retried a bounded number of
times, and a path that still cannot be removed is logged and left behind.
"""

import asyncio
import errno
import logging
import os
import shutil

from .. import config

logger = logging.getLogger(__name__)

# Errors worth retrying, typically file locks held briefly by another process
TRANSIENT_REMOVAL_ERRNOS = frozenset(
    {
        errno.EBUSY,
        errno.EMFILE,
        errno.ENFILE,
        errno.ENOTEMPTY,
        errno.EPERM,
    }
)


def detect_transient_removal_failure(error: OSError) -> bool:
    """
    Detect whether a removal failure is transient and should trigger a retry.

    Parameters:
        error (OSError): The error raised while removing a path.

    Returns:
        `True` if the errno indicates a retryable failure, `False` otherwise.
    """
    return error.errno in TRANSIENT_REMOVAL_ERRNOS


def remove_path(path: str) -> None:
    """Remove a file or directory tree. A missing path is not an error.

    Symlinks are removed, never followed.

    Args:
        path: File or directory to remove

    Raises:
        OSError: If the path exists but cannot be removed
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        return


async def remove_path_with_retries(
    path: str,
    max_retries: int = config.CLEANUP_MAX_RETRIES,
    retry_delay: float = config.CLEANUP_RETRY_DELAY_SECONDS,
) -> bool:
    """
    Remove a path, retrying transient failures with linear backoff.

    Never raises for removal failures; the final error is logged as a warning.

    Parameters:
        path (str): File or directory to remove.
        max_retries (int): Retries after the first attempt.
        retry_delay (float): Seconds to wait before the first retry; each
            further retry waits one more multiple of this.

    Returns:
        `True` if the path is gone, `False` if it could not be removed.
    """
    for attempt in range(max_retries + 1):
        try:
            await asyncio.to_thread(remove_path, path)
        except OSError as e:
            if attempt < max_retries and detect_transient_removal_failure(e):
                backoff_seconds = retry_delay * (attempt + 1)
                logger.debug(
                    "Removal of %s failed (%s), retrying in %.2fs (attempt %d/%d)",
                    path,
                    e,
                    backoff_seconds,
                    attempt + 1,
                    max_retries,
                )
                await asyncio.sleep(backoff_seconds)
                continue

            logger.warning("Could not remove temporary path %s: %s", path, e)
            return False

        logger.debug("Removed temporary path: %s", path)
        return True

    return False
