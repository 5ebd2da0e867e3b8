"""
Configuration loader for fieldlog.

Loads session settings from fieldlog.env.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import envparse
from .catalog import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "fieldlog.env"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Session settings from fieldlog.env"""
    locale: str = DEFAULT_LOCALE
    catalog_path: Optional[Path] = None  # YAML catalog overrides
    log_level: str = "WARNING"


def settings_from_env(env: dict[str, str], base_dir: Path) -> Settings:
    """Build Settings from parsed env values.

    A relative FIELDLOG_CATALOG is resolved against base_dir.
    """
    catalog_path = None
    if env.get("FIELDLOG_CATALOG"):
        catalog_path = Path(env["FIELDLOG_CATALOG"]).expanduser()
        if not catalog_path.is_absolute():
            catalog_path = base_dir / catalog_path

    log_level = env.get("FIELDLOG_LOG_LEVEL", "WARNING").upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(f"Unknown FIELDLOG_LOG_LEVEL '{log_level}', using 'WARNING'")
        log_level = "WARNING"

    return Settings(
        locale=env.get("FIELDLOG_LOCALE", DEFAULT_LOCALE),
        catalog_path=catalog_path,
        log_level=log_level,
    )


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load fieldlog.env and return Settings.

    With no path, ./fieldlog.env is read when present and defaults are used
    otherwise. An explicit path must exist.

    Raises:
        FileNotFoundError: if an explicit path doesn't exist
        ValueError: if the file has invalid syntax
    """
    if path is None:
        path = Path.cwd() / DEFAULT_SETTINGS_FILE
        if not path.exists():
            logger.debug(f"No {DEFAULT_SETTINGS_FILE} found, using defaults")
            return Settings()

    env = envparse.load_env(path)
    return settings_from_env(env, path.parent)
