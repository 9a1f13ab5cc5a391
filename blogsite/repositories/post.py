"""Post repository for database operations."""

from collections import Counter
from collections.abc import Mapping
from logging import getLogger
from typing import Any

from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from blogsite.configs import file_logger
from blogsite.errors.database import (
    DuplicateEntryError,
    PersistenceError,
    StorageUnavailableError,
)
from blogsite.errors.ingestion import MissingRequiredInputError
from blogsite.models.post import PostDB
from blogsite.utils.helpers import slugify

logger = file_logger(getLogger(__name__))

FALLBACK_SLUG = "post"
UPDATABLE_FIELDS = frozenset({"body", "description", "tags", "created_at", "updated_at"})


class PostRepository:
    """
    Repository for Post database operations.

    Posts are looked up by title when synchronizing files and by slug when
    serving pages. Writes go through :meth:`update`, which persists all
    fields with a single flush or raises without applying any of them.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _execute(self, statement: Select) -> Any:
        try:
            return await self.session.execute(statement)
        except (OperationalError, InterfaceError, OSError) as e:
            raise StorageUnavailableError(detail=f"Failed to query posts: {e}") from e

    async def get_by_title(self, title: str) -> PostDB | None:
        """Get post by its (unique) title."""
        result = await self._execute(select(PostDB).where(PostDB.title == title))
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> PostDB | None:
        """Get post by slug."""
        result = await self._execute(select(PostDB).where(PostDB.slug == slug))
        return result.scalar_one_or_none()

    async def _slug_taken(self, slug: str) -> bool:
        result = await self._execute(select(1).where(PostDB.slug == slug).limit(1))
        return result.scalar_one_or_none() is not None

    async def unique_slug(self, title: str) -> str:
        """
        Derive a slug from a title that no stored post uses yet.

        Args:
            title: Post title

        Returns:
            str: ``slugify(title)``, suffixed with ``-2``, ``-3``... on clashes
        """
        base = slugify(title) or FALLBACK_SLUG
        slug = base
        suffix = 1
        while await self._slug_taken(slug):
            suffix += 1
            slug = f"{base}-{suffix}"
        return slug

    async def find_or_create_by_title(self, title: str) -> PostDB:
        """
        Return the post with this title, or a new unsaved one.

        The new post is not added to the session; it is persisted by the
        following :meth:`update`.

        Args:
            title: Post title

        Returns:
            PostDB: Stored post, or a transient post with ``id`` set to None

        Raises:
            MissingRequiredInputError: If the title is empty
        """
        if not title or not title.strip():
            mssg = "Cannot create a post without a title"
            raise MissingRequiredInputError(mssg)

        if post := await self.get_by_title(title):
            return post

        logger.info(f"No post titled {title!r} yet, creating one")
        return PostDB(title=title, slug=await self.unique_slug(title))

    async def update(self, post: PostDB, fields: Mapping[str, Any]) -> PostDB:
        """
        Apply fields to a post and persist it.

        Args:
            post: Stored or transient post
            fields: Column values to set

        Returns:
            PostDB: Refreshed post with identity and timestamps

        Raises:
            ValueError: If a field is not updatable
            DuplicateEntryError: If a unique constraint is violated
            PersistenceError: For other rejected writes
            StorageUnavailableError: If the database cannot be reached
        """
        if unknown := set(fields) - UPDATABLE_FIELDS:
            mssg = f"Cannot update post fields: {', '.join(sorted(unknown))}"
            raise ValueError(mssg)

        for key, value in fields.items():
            setattr(post, key, value)

        return await self._add_and_refresh(post)

    async def newest_first(self, skip: int = 0, limit: int | None = None) -> list[PostDB]:
        """
        Get posts ordered by publication date, newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (all when None)

        Returns:
            list[PostDB]: Posts in display order
        """
        query = select(PostDB).order_by(desc(PostDB.created_at), desc(PostDB.id)).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self._execute(query)
        return list(result.scalars().all())

    async def by_tag(self, tag: str) -> list[PostDB]:
        """
        Get posts carrying a tag, newest first.

        Tags are filtered in Python so the same query works on SQLite and
        PostgreSQL JSON columns.
        """
        posts = [post for post in await self.newest_first() if tag in post.tags]
        logger.info(f"Found {len(posts)} posts tagged {tag!r}")
        return posts

    async def tag_counts(self) -> dict[str, int]:
        """Count posts per tag, sorted by tag name."""
        counter: Counter[str] = Counter()
        for post in await self.newest_first():
            counter.update(set(post.tags))
        return dict(sorted(counter.items()))

    async def count(self) -> int:
        """Count stored posts."""
        result = await self._execute(select(func.count()).select_from(PostDB))
        count = result.scalar()
        return count if count is not None else 0

    async def _add_and_refresh(self, post: PostDB) -> PostDB:
        """
        Add a post and refresh it from the database with error handling.

        Args:
            post: Post to add

        Returns:
            PostDB: Refreshed post

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            PersistenceError: For other database errors
            StorageUnavailableError: If the connection fails
        """
        try:
            self.session.add(post)
            await self.session.flush()
            await self.session.refresh(post)
            return post
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise PersistenceError(detail=f"Database integrity error: {error_msg}") from e
        except (OperationalError, InterfaceError, OSError) as e:
            await self.session.rollback()
            raise StorageUnavailableError(detail=f"Failed to save post: {e}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(detail=f"Failed to save post: {e}") from e
