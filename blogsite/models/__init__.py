"""Database models for the application."""

from blogsite.models.post import PostDB

__all__ = ["PostDB"]
