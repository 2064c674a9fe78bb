"""
mediabrowser configuration.

Settings come from three layers, later ones winning:

1. Model defaults below
2. A YAML file (``--config``, ``$MEDIABROWSER_CONFIG``, ./config.yaml or
   ~/.config/mediabrowser/config.yaml)
3. ``MEDIABROWSER_*`` environment variables listed in ``ENV_OVERRIDES``
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "MEDIABROWSER_CONFIG"
CONFIG_FILE_NAME = "config.yaml"

# (environment variable, section, key)
ENV_OVERRIDES = (
    ("MEDIABROWSER_DATABASE_URL", "database", "url"),
    ("MEDIABROWSER_LOG_LEVEL", "logging", "level"),
    ("MEDIABROWSER_LOG_FILE", "logging", "file"),
    ("MEDIABROWSER_COOKIES_FILE", "extractor", "cookies_file"),
    ("MEDIABROWSER_SOCKET_TIMEOUT", "extractor", "socket_timeout"),
)

_config: Optional["MediaBrowserConfig"] = None


class DatabaseConfig(BaseModel):
    """Local playlist and history database."""
    url: str = "sqlite:///./mediabrowser.db"
    echo: bool = False


class LoggingConfig(BaseModel):
    """Root logger settings, see mediabrowser.utils.logging_setup."""
    level: str = "INFO"
    file: str = "logs/mediabrowser.log"
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console: bool = True
    to_file: bool = True

    @field_validator("level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return value.upper()


class PreparerConfig(BaseModel):
    """Messages the playback preparer reports to the media session."""
    content_not_supported_message: str = "This content is not supported."
    prepare_error_message: str = "Sorry, something went wrong."


class ExtractorConfig(BaseModel):
    """yt-dlp extraction settings."""
    cookies_file: str = ""
    socket_timeout: Optional[float] = None  # None = yt-dlp default
    user_agent: Optional[str] = None


class MediaBrowserConfig(BaseModel):
    """Complete mediabrowser configuration."""
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    preparer: PreparerConfig = Field(default_factory=PreparerConfig)
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)


def find_config_file() -> Optional[Path]:
    """Return the first existing config file of the default search path."""
    candidates = []
    if os.environ.get(CONFIG_ENV_VAR):
        candidates.append(Path(os.environ[CONFIG_ENV_VAR]))
    candidates.append(Path.cwd() / CONFIG_FILE_NAME)
    candidates.append(Path.home() / ".config" / "mediabrowser" / CONFIG_FILE_NAME)

    return next((path for path in candidates if path.is_file()), None)


def load_config(config_path: Optional[str] = None) -> MediaBrowserConfig:
    """
    Load, validate and cache the configuration.

    Args:
        config_path: YAML file to read. When omitted the default search path
            is used; a missing file means defaults only.

    Returns:
        The new global configuration
    """
    global _config

    path = Path(config_path) if config_path else find_config_file()

    raw: dict[str, Any] = {}
    if path is not None and path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}

    _apply_env_overrides(raw)

    # Values from the environment are strings; pydantic coerces them
    _config = MediaBrowserConfig.model_validate(raw)
    return _config


def get_config() -> MediaBrowserConfig:
    """Return the cached configuration, loading it on first use."""
    if _config is None:
        return load_config()
    return _config


def reload_config() -> MediaBrowserConfig:
    """Drop the cached configuration and load it again."""
    global _config
    _config = None
    return load_config()


def _apply_env_overrides(raw: dict[str, Any]) -> None:
    for env_var, section, key in ENV_OVERRIDES:
        value = os.environ.get(env_var)
        if value is None:
            continue
        # An empty YAML section ("logging:") loads as None
        if not isinstance(raw.get(section), dict):
            raw[section] = {}
        raw[section][key] = value


class _ConfigProxy:
    """
    Module-level stand-in for the configuration.

    ``from mediabrowser.config import config`` works before anything was
    loaded; attribute access goes to ``get_config()``.
    """

    def __getattr__(self, name: str) -> Any:
        return getattr(get_config(), name)

    def __repr__(self) -> str:
        return f"<ConfigProxy {get_config()!r}>"


config = _ConfigProxy()
