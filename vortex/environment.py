"""Load environment files without clobbering variables already set."""

import os

from dotenv import dotenv_values

from .errors import EnvironmentFileError


def default_env_path() -> str:
    """Get the default environment file path."""
    return os.path.realpath(".env")


def read_environment_file(path: str, error_missing_file: bool) -> dict[str, str]:
    """
    Read a dotenv file into os.environ.

    Variables that are already set in the environment keep their value.

    Args:
        path: The environment file to read
        error_missing_file: Raise if the file doesn't exist instead of
            silently doing nothing

    Returns:
        The variables that were applied

    Raises:
        EnvironmentFileError: If the file is missing (and required) or unreadable
    """
    if not os.path.exists(path):
        if error_missing_file:
            raise EnvironmentFileError(f"Environment file not found: {path}")
        return {}

    try:
        values = dotenv_values(path)
    except (OSError, UnicodeDecodeError) as e:
        raise EnvironmentFileError(f"Failed to load environment file: {e}") from e

    applied = {}
    for key, value in values.items():
        # Keys without "=" parse to None; there is nothing to set
        if value is None or key in os.environ:
            continue
        os.environ[key] = value
        applied[key] = value

    return applied
