"""Utility helper functions."""

from blogsite.utils.helpers import get_summary, host, slugify, today_str
from blogsite.utils.timezone import as_utc, parse_post_date, utc_now

__all__ = [
    "as_utc",
    "get_summary",
    "host",
    "parse_post_date",
    "slugify",
    "today_str",
    "utc_now",
]
