"""Resource and data path resolution."""

import os
from pathlib import Path


def get_app_dir() -> Path:
    """Get the project root (contains src/, pyproject.toml)."""
    # This file is at src/sclogparser/config/paths.py
    return Path(__file__).resolve().parents[3]


def get_package_dir() -> Path:
    """Directory of the installed sclogparser package (bundled data lives here)."""
    return Path(__file__).resolve().parent.parent


def get_resource_path(relative_path: str) -> Path:
    """
    Get the absolute path to a bundled resource file.

    Args:
        relative_path: Path relative to the package directory (e.g. "data/friendly_names.json")
    """
    return get_package_dir() / relative_path


def get_data_dir(portable: bool = False) -> Path:
    """
    Get the data directory for the application log.

    Args:
        portable: If True, use ./data under the project root

    Returns:
        Path to data directory (created if needed)
    """
    if portable:
        data_dir = get_app_dir() / "data"
    else:
        local_app_data = os.environ.get("LOCALAPPDATA", "")
        if local_app_data:
            data_dir = Path(local_app_data) / "SCLogParser"
        else:
            data_dir = Path.home() / ".sclogparser"

    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_default_names_path() -> Path:
    """Path to the friendly-name table shipped with the package."""
    return get_resource_path("data/friendly_names.json")
