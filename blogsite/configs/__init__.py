from blogsite.configs.settings import (
    LEGACY_REDIRECTS,
    POST_DATE_FORMAT,
    POST_FILENAME_DATE_FORMAT,
    CdnConfig,
    ErrorPolicy,
    Settings,
    cdn_config,
    file_logger,
    settings,
)

__all__ = [
    "CdnConfig",
    "ErrorPolicy",
    "LEGACY_REDIRECTS",
    "POST_DATE_FORMAT",
    "POST_FILENAME_DATE_FORMAT",
    "Settings",
    "cdn_config",
    "file_logger",
    "settings",
]
