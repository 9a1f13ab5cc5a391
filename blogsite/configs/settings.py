"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog backend and its ingestion scripts.
"""

from enum import StrEnum
from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MAX_TITLE_LENGTH = 200
MAX_SLUG_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 500

POST_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
POST_FILENAME_DATE_FORMAT = "%Y-%m-%d"

# Old URLs that moved when the blog changed its permalink style; targets are
# the slugs generated from the post titles
LEGACY_REDIRECTS: dict[str, str] = {
    "/2015/05/19/rubygem-configuration-pattern": "/blog/rubygem-configuration-pattern",
    "/blog/2018/02/09/git_data_api_example_in_ruby": "/blog/git-data-api-example-in-ruby",
}


class ErrorPolicy(StrEnum):
    """What the batch migrator does when a single post fails."""

    FAIL_FAST = "fail_fast"
    CONTINUE = "continue"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/blog.log"

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Content
    POSTS_DIR: Path = Path("posts")
    NOW_PAGE_PATH: Path = Path("data/now.md")
    INGEST_ERROR_POLICY: ErrorPolicy = ErrorPolicy.FAIL_FAST

    # CDN
    SURROGATE_KEY_NAMESPACE: str = "posts"


class CdnConfig(BaseSettings):
    """CDN cache header configuration."""

    model_config = SettingsConfigDict(env_prefix="CDN_", case_sensitive=False)

    max_age: int = 86400  # 24 hours
    stale_while_revalidate: int = 86400
    stale_if_error: int = 86400


settings = Settings()
cdn_config = CdnConfig()

_file_handler: RotatingFileHandler | None = None


def _get_file_handler() -> RotatingFileHandler:
    global _file_handler

    if _file_handler is None:
        log_file = Path(settings.LOG_FILE)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
        )
        _file_handler.setLevel(INFO)
        _file_handler.setFormatter(JsonFormatter())
    return _file_handler


def file_logger(logger: Logger) -> Logger:
    """
    Attach the shared JSON file handler to a logger.

    Does nothing when ``LOG_TO_FILE`` is disabled, so modules can always wrap
    their logger with it.

    Args:
        logger: Logger to extend.

    Returns:
        Logger: The same logger instance.
    """
    if not settings.LOG_TO_FILE:
        return logger

    handler = _get_file_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    return logger
