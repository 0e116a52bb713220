"""Configuration utilities."""

import tempfile
import platformdirs
from pathlib import Path


def expand_path_variables(path: str, app_name: str | None = None) -> str:
    """Expand ${VAR} variables in paths.

    Supported variables:
        ${USER_HOME}: User's home directory
        ${USER_DATA}: User data directory
        ${USER_CONFIG}: User config directory
        ${USER_CACHE}: User cache directory
        ${USER_LOGS}: User log directory
        ${TEMP}: Temporary directory

    Args:
        path: Path string with variables
        app_name: Optional application name for the platformdirs lookups

    Returns:
        Expanded path string
    """
    if not isinstance(path, str):
        return path

    replacements = {
        "${USER_HOME}": lambda: str(Path.home()),
        "${USER_DATA}": lambda: platformdirs.user_data_dir(app_name, appauthor=False),
        "${USER_CONFIG}": lambda: platformdirs.user_config_dir(app_name, appauthor=False),
        "${USER_CACHE}": lambda: platformdirs.user_cache_dir(app_name, appauthor=False),
        "${USER_LOGS}": lambda: platformdirs.user_log_dir(app_name, appauthor=False),
        "${TEMP}": tempfile.gettempdir,
    }

    for var, resolve in replacements.items():
        if var in path:
            path = path.replace(var, resolve())

    return path
