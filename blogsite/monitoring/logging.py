"""
Structured logging configuration.

Console logging goes through structlog's ``ProcessorFormatter`` so records
from standard library loggers (``getLogger(__name__)``) and structlog
loggers share one format:

- Pretty console output in development
- JSON output everywhere else
- Control characters escaped to prevent log injection

Examples
--------
>>> from blogsite.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger("blogsite.scripts")
>>> logger.info("Migrated post", post_id=42)
"""

from logging import StreamHandler, root

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.dev import ConsoleRenderer
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from blogsite.configs.settings import settings
from blogsite.utils.helpers import today_str

# Characters to sanitize to prevent log injection
CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Remove control characters and sanitize log messages.

    Args:
        message: Raw log message that might contain injection attempts.

    Returns:
        Sanitized message with control characters escaped or removed.

    Examples:
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return str(message).translate(CONTROL_CHARS)


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add a local timestamp to the log entry."""
    event_dict["timestamp"] = today_str()
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Escape control characters in every string value of the event."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = sanitize_log_message(value)
    return event_dict


def get_renderer(*, colors: bool = True) -> Processor:
    """
    Get the final renderer based on environment.

    Args:
        colors: Whether to enable colors in ConsoleRenderer.
    """
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(colors=colors, pad_level=False)
    return JSONRenderer()


def configure_logging() -> None:
    """Configure structured console logging for the application and scripts."""
    # Clear any existing root handlers to prevent duplicates
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            add_logger_name,
            add_log_level,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = StreamHandler()
    console_handler.setFormatter(
        ProcessorFormatter(
            processors=[
                ExtraAdder(),
                sanitize_event_dict,
                ProcessorFormatter.remove_processors_meta,
                get_renderer(colors=True),
            ],
            foreign_pre_chain=[add_log_level, add_timestamp],
        ),
    )
    root.addHandler(console_handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        Configured structlog BoundLogger instance.
    """
    return struct_logger(name)
