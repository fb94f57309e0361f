"""Application settings for Project Tracker."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from PySide6.QtCore import QSettings

from projtrack.exc import ConfigurationError

#: The settings file looked for in the working directory.
DEFAULT_SETTINGS_FILE: Final[str] = "appsettings.ini"
#: Environment variable that may point at another settings file.
SETTINGS_ENV_VAR: Final[str] = "PROJTRACK_SETTINGS"
#: The key holding the SQLAlchemy database URL.
CONNECTION_STRING_KEY: Final[str] = "ConnectionStrings/DefaultConnection"
#: The default log level.
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
#: The default log file.
DEFAULT_LOG_FILE: Final[str] = "projtrack.log"


@dataclass(frozen=True)
class Settings:
    """Settings read at startup."""

    #: SQLAlchemy URL of the database.
    connection_string: str
    #: Name of the log level, e.g. ``INFO``.
    log_level: str = DEFAULT_LOG_LEVEL
    #: File the log is written to.
    log_file: Path = Path(DEFAULT_LOG_FILE)


def get_settings_path(path: Path | str | None = None) -> Path:
    """
    Work out which settings file to read.

    - An explicit ``path`` wins.
    - Otherwise the file named by ``$PROJTRACK_SETTINGS`` is used.
    - Otherwise ``appsettings.ini`` in the working directory is used.

    Args:
        path: Optional explicit path to the settings file

    Returns:
        Path to the settings file

    """
    if path is not None:
        return Path(path)
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_SETTINGS_FILE


def _as_str(value: Any) -> str:
    # QSettings splits unquoted INI values on commas
    if isinstance(value, list):
        return ",".join(str(v) for v in value).strip()
    if value is None:
        return ""
    return str(value).strip()


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Read the INI settings file.

    The file looks like::

        [ConnectionStrings]
        DefaultConnection=sqlite:///projtrack.db

        [Logging]
        Level=INFO
        File=projtrack.log

    Args:
        path: Optional explicit path to the settings file

    Raises:
        ConfigurationError: If the file is missing or unreadable, if
            ``DefaultConnection`` is absent or empty, or if the log level is
            not a known level name, or if the log file's directory does not
            exist

    Returns:
        The loaded settings

    """
    settings_path = get_settings_path(path)
    if not settings_path.is_file():
        raise ConfigurationError(
            CONNECTION_STRING_KEY, str(settings_path), reason="is not found (no such file)"
        )
    settings = QSettings(str(settings_path), QSettings.Format.IniFormat)
    connection_string = _as_str(settings.value(CONNECTION_STRING_KEY, ""))
    if settings.status() != QSettings.Status.NoError:
        raise ConfigurationError(
            CONNECTION_STRING_KEY, str(settings_path), reason="could not be read"
        )
    if not connection_string:
        raise ConfigurationError(CONNECTION_STRING_KEY, str(settings_path))

    log_level = _as_str(settings.value("Logging/Level", DEFAULT_LOG_LEVEL)).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ConfigurationError(
            "Logging/Level", str(settings_path), reason="has an unknown value"
        )
    log_file = Path(
        _as_str(settings.value("Logging/File", DEFAULT_LOG_FILE)) or DEFAULT_LOG_FILE
    )
    if not log_file.parent.is_dir():
        raise ConfigurationError(
            "Logging/File",
            str(settings_path),
            reason="names a directory that does not exist",
        )

    return Settings(
        connection_string=connection_string,
        log_level=log_level,
        log_file=log_file,
    )
