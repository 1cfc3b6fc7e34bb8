"""
Configuration settings with environment variable loading.

Values may also come from a .env file. Variables already present in the
environment take precedence over the file.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dop.util.views import DUPLICATE_KEY_POLICIES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass(frozen=True)
class ViewConfig:
    """Live view construction configuration."""
    duplicate_key_policy: str = "error"

    def __post_init__(self):
        if self.duplicate_key_policy not in DUPLICATE_KEY_POLICIES:
            raise ConfigurationError(
                f"DOP_DUPLICATE_KEYS must be one of {', '.join(DUPLICATE_KEY_POLICIES)}, "
                f"got '{self.duplicate_key_policy}'"
            )


@dataclass(frozen=True)
class FactoryConfig:
    """Bean property discovery configuration."""
    include_properties: bool = True
    include_private: bool = False


@dataclass(frozen=True)
class Settings:
    """Application settings container."""
    view: ViewConfig
    factory: FactoryConfig
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from environment variables.

    Optionally loads from a .env file first.

    Args:
        env_file: Optional path to .env file

    Returns:
        Configured Settings instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if env_file and env_file.exists():
        _load_env_file(env_file)
    elif Path(".env").exists():
        _load_env_file(Path(".env"))

    try:
        view = ViewConfig(
            duplicate_key_policy=os.getenv("DOP_DUPLICATE_KEYS", "error").strip().lower(),
        )

        factory = FactoryConfig(
            include_properties=_parse_bool("DOP_INCLUDE_PROPERTIES", True),
            include_private=_parse_bool("DOP_INCLUDE_PRIVATE", False),
        )

        settings = Settings(
            view=view,
            factory=factory,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

        logger.debug(f"Settings: {settings}")

        return settings

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{raw}'")


def _load_env_file(path: Path) -> None:
    """
    Load environment variables from a file.

    Handles KEY=value lines, quoted values, comments and empty lines.
    """
    logger.debug(f"Loading environment from {path}")

    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                logger.warning(f"Invalid line {line_num} in {path}: no '=' found")
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip()

            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]

            # Env vars take precedence
            if key not in os.environ:
                os.environ[key] = value
