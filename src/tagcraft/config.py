"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/tagcraft/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")
_ATTRIBUTE_NAME = re.compile(r"[A-Za-z_:][A-Za-z0-9_:.-]*")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class MarkupConfig(BaseModel):
    """How Tag Expressions are rendered into markup."""

    default_tag: str = "div"
    class_attribute: str = "className"
    preview_cursor: str = "|"

    @field_validator("default_tag")
    @classmethod
    def _valid_tag(cls, value: str) -> str:
        if not _TAG_NAME.fullmatch(value):
            msg = f"default_tag must be a tag identifier, got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("class_attribute")
    @classmethod
    def _valid_attribute(cls, value: str) -> str:
        if not _ATTRIBUTE_NAME.fullmatch(value):
            msg = f"class_attribute must be an attribute name, got {value!r}"
            raise ValueError(msg)
        return value


class CompletionConfig(BaseModel):
    """Which suggestions the completion provider offers."""

    trigger_characters: list[str] = [".", "]"]
    keyword_snippets: bool = True
    scaffold: bool = True

    @field_validator("trigger_characters")
    @classmethod
    def _single_characters(cls, value: list[str]) -> list[str]:
        bad = [c for c in value if len(c) != 1]
        if bad:
            msg = f"trigger characters must be single characters, got {bad!r}"
            raise ValueError(msg)
        return value


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    level: str = "INFO"
    log_dir: Path = Path("logs")
    file_logging: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            msg = f"level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return upper


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``MARKUP__CLASS_ATTRIBUTE``, ``COMPLETION__SCAFFOLD``,
    ``LOGGING__LEVEL``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    markup: MarkupConfig = MarkupConfig()
    completion: CompletionConfig = CompletionConfig()
    logging: LoggingConfig = LoggingConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.debug("Settings: no .env file found, using env vars and defaults")

    return settings
