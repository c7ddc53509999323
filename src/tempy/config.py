"""Configuration for tempy.

The root temporary directory is resolved once, when the package is imported.
Everything else in the package reads ``root_temporary_directory`` from this
module at call time.
"""

import logging
import os
import tempfile
from collections.abc import Mapping

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ROOT_DIRECTORY_ENV_VAR = "TEMPY_ROOT_DIRECTORY"

# Bytes of randomness per generated name (hex encoded to twice as many chars)
RANDOM_BYTES = 64

# Cleanup retries for transient removal failures, linear backoff
CLEANUP_MAX_RETRIES = 2
CLEANUP_RETRY_DELAY_SECONDS = 0.1


def resolve_root_temporary_directory(environ: Mapping[str, str] | None = None) -> str:
    """Resolve the root directory that all temporary paths are created under.

    Resolution priority:
    1. TEMPY_ROOT_DIRECTORY environment variable
    2. tempfile.gettempdir() - the platform temp directory

    Symlinks are resolved, so the result compares equal to paths reported by
    child processes (macOS, for example, links /var to /private/var).

    Args:
        environ: Environment mapping to read from (defaults to os.environ)

    Returns:
        Absolute, non-empty path of the root temporary directory

    Raises:
        ConfigurationError: If TEMPY_ROOT_DIRECTORY is set to a relative path
    """
    if environ is None:
        environ = os.environ

    # Priority 1: Environment variable
    env_path = environ.get(ROOT_DIRECTORY_ENV_VAR)
    if env_path:
        if not os.path.isabs(env_path):
            raise ConfigurationError(
                f"{ROOT_DIRECTORY_ENV_VAR} must be an absolute path, got: {env_path!r}"
            )
        logger.debug("Using root temporary directory from %s: %s", ROOT_DIRECTORY_ENV_VAR, env_path)
        return os.path.realpath(env_path)

    # Priority 2: Platform default
    return os.path.realpath(tempfile.gettempdir())


root_temporary_directory = resolve_root_temporary_directory()
