from collections.abc import MutableMapping
from datetime import datetime
from re import sub
from typing import Any
from unicodedata import normalize

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def slugify(text: str) -> str:
    """
    Convert a post title into a URL-safe slug.

    Accented characters are transliterated to ASCII, everything that is not a
    letter or digit collapses into a single hyphen.

    Examples:
        >>> slugify("Example Post")
        'example-post'
        >>> slugify("Café: Notes & Ideas!")
        'cafe-notes-ideas'
    """
    ascii_text = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = sub(r"[^a-z0-9]+", "-", ascii_text.lower())
    return slug.strip("-")
