"""Repository layer for database operations."""

from blogsite.repositories.post import PostRepository

__all__ = ["PostRepository"]
