"""Version information for moverchart."""

import os
from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Get the installed package version, or 'unknown' when not installed."""
    try:
        return version("moverchart")
    except PackageNotFoundError:
        return "unknown"


def get_git_commit() -> str:
    """Get the git commit hash from the GIT_COMMIT environment variable."""
    return os.getenv("GIT_COMMIT", "unknown")


def get_version_info() -> str:
    """Get formatted version information for logging.

    Returns:
        Formatted string with package version and git commit.
    """
    return f"version={get_package_version()}, commit={get_git_commit()}"
