"""
Post synchronizer.

Upserts a parsed post file into the post table: the post is matched by
title, created when missing, and all synchronized fields are written
together with a fresh ``updated_at`` in a single flush.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from logging import getLogger

from sqlalchemy.ext.asyncio import AsyncSession

from blogsite.configs import file_logger
from blogsite.errors.ingestion import MalformedDocumentError
from blogsite.models.post import PostDB
from blogsite.repositories.post import PostRepository
from blogsite.schemas.post import PostDocument
from blogsite.utils.timezone import as_utc, parse_post_date, utc_now

logger = file_logger(getLogger(__name__))

Clock = Callable[[], datetime]

TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def next_updated_at(previous: datetime | None, now: datetime) -> datetime:
    """
    Return the ``updated_at`` for a new write.

    The result is strictly later than ``previous`` even when the clock has
    not advanced (or went backwards), so every write changes the post's
    cache key.
    """
    now = as_utc(now)
    if previous is None:
        return now
    previous = as_utc(previous)
    if now <= previous:
        return previous + TIMESTAMP_RESOLUTION
    return now


class PostSynchronizer:
    """
    Upsert posts parsed from files.

    Attributes:
        repository: Post repository bound to the current session.
        clock: Source of the current time, injectable for tests.
    """

    def __init__(self, session: AsyncSession, clock: Clock = utc_now) -> None:
        self.repository = PostRepository(session)
        self.clock = clock

    async def sync(self, document: PostDocument) -> PostDB:
        """
        Create or update the post described by a document.

        Args:
            document: Parsed post file

        Returns:
            PostDB: Stored post with its ID and timestamps

        Raises:
            MalformedDocumentError: If the date header is not a date
            MissingRequiredInputError: If the title is empty
            PersistenceError: If the write is rejected
            StorageUnavailableError: If the database cannot be reached
        """
        try:
            created_at = parse_post_date(document.date)
        except ValueError as e:
            mssg = f"Invalid date {document.date!r} in post {document.title!r}"
            raise MalformedDocumentError(mssg) from e

        post = await self.repository.find_or_create_by_title(document.title)
        is_new = post.id is None

        post = await self.repository.update(
            post,
            {
                "body": document.body,
                "description": document.description,
                "created_at": created_at,
                "tags": list(document.tags),
                "updated_at": next_updated_at(post.updated_at, self.clock()),
            },
        )
        logger.info(f"{'Created' if is_new else 'Updated'} post {post.id} ({post.title!r})")
        return post
