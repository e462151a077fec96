"""Path resolution for bundled resources and user data files.

Bundled resources (the default config.json) are read from the package
directory. Files BoardKit writes, such as log files, go to the
platform-specific user data directory, since the package directory is usually
not writable once installed.
"""

import os
import sys
from pathlib import Path


APP_NAME = "BoardKit"


def get_package_root() -> Path:
    """Get the boardkit package directory.

    Returns:
        Path to the directory containing the boardkit subpackages.
    """
    return Path(__file__).resolve().parent.parent


def get_user_data_directory() -> Path:
    """Get the platform-specific user data directory.

    Returns:
        Path to the user data directory for BoardKit.
    """
    if sys.platform == "win32":
        # Windows: %APPDATA%\BoardKit
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    elif sys.platform == "darwin":
        # macOS: ~/Library/Application Support/BoardKit
        return Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        # Linux and other Unix-like: $XDG_DATA_HOME/BoardKit or ~/.local/share/BoardKit
        xdg_data_home = os.getenv("XDG_DATA_HOME")
        if xdg_data_home:
            return Path(xdg_data_home) / APP_NAME
        return Path.home() / ".local" / "share" / APP_NAME


def resolve_data_file_path(filename: str) -> Path:
    """Resolve where a user data file should be written.

    Args:
        filename: Name of the data file (e.g., "boardkit_2026-01-01.log").

    Returns:
        Path inside the user data directory. The directory is not created.
    """
    return get_user_data_directory() / filename


def get_package_resource_path(relative_path: str) -> Path:
    """Get the path to a bundled read-only resource.

    Args:
        relative_path: Path relative to the package root (e.g., "config/config.json").

    Returns:
        Path to the resource file.
    """
    return get_package_root() / relative_path
