"""
Batch migration of post files into the database.

Files are processed one after another in the order given, each inside its
own transaction, so a failing file never leaves a half-written post behind.
Two runs touching the same title at the same time race on ``updated_at``
(last write wins); runs are expected to be sequential.
"""

from collections.abc import Callable, Iterable, Sequence
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path

from anyio import Path as AsyncPath
from sqlalchemy.ext.asyncio import AsyncSession

from blogsite.configs import ErrorPolicy, file_logger, settings
from blogsite.db import transaction
from blogsite.errors.base import BaseAppError
from blogsite.models.post import PostDB
from blogsite.services.parser import parse_document
from blogsite.services.synchronizer import Clock, PostSynchronizer
from blogsite.utils.timezone import utc_now

logger = file_logger(getLogger(__name__))

SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]
Reporter = Callable[[str], None]

# Failures that concern a single file; anything else aborts the run regardless of policy
PER_FILE_ERRORS = (BaseAppError, OSError, UnicodeDecodeError)


@dataclass(frozen=True)
class FailedPost:
    """A post file that could not be migrated."""

    path: Path
    error: Exception


@dataclass
class MigrationReport:
    """Outcome of a migration run."""

    migrated: list[PostDB] = field(default_factory=list)
    failed: list[FailedPost] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def collect_post_paths(directory: Path) -> list[Path]:
    """
    List the post files of a directory.

    Post files are named ``YYYY-MM-DD-<slug>.md``, so sorting by name
    yields them in publication order.
    """
    return sorted(path for path in directory.glob("*.md") if path.is_file())


def describe_post(post: PostDB) -> str:
    return f"Post#<id: {post.id}, title: {post.title}>"


class PostsMigrator:
    """
    Parse and synchronize a sequence of post files.

    Attributes:
        session_scope: Factory for the per-file transaction.
        policy: Whether to stop at the first failing file.
        report: Sink for progress lines.
        clock: Time source handed to the synchronizer.
    """

    def __init__(
        self,
        session_scope: SessionScope = transaction,
        policy: ErrorPolicy | None = None,
        report: Reporter | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.session_scope = session_scope
        self.policy = policy or settings.INGEST_ERROR_POLICY
        self.report = report or logger.info
        self.clock = clock

    async def migrate(self, path: Path) -> PostDB:
        """
        Migrate a single post file.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not UTF-8
            MalformedDocumentError: If the header block is broken
            DatabaseError: If the post cannot be stored
        """
        content = await AsyncPath(path).read_text(encoding="utf-8")
        document = parse_document(content)
        async with self.session_scope() as session:
            return await PostSynchronizer(session, clock=self.clock).sync(document)

    async def run(self, paths: Iterable[Path]) -> MigrationReport:
        """
        Migrate post files in order.

        Args:
            paths: Post files to migrate

        Returns:
            MigrationReport: Migrated posts and, with the continue policy,
            the files that failed

        Raises:
            Exception: The first per-file error when the policy is fail-fast
        """
        result = MigrationReport()
        for path in paths:
            self.report(f"Migrating {path}")
            try:
                post = await self.migrate(path)
            except PER_FILE_ERRORS as e:
                if self.policy is ErrorPolicy.FAIL_FAST:
                    logger.error(f"Migration of {path} failed, stopping: {e}")
                    raise
                logger.warning(f"Migration of {path} failed, continuing: {e}")
                self.report(f"Failed {path}: {e}")
                result.failed.append(FailedPost(path=path, error=e))
                continue

            self.report(describe_post(post))
            result.migrated.append(post)

        logger.info(f"Migrated {len(result.migrated)} posts, {len(result.failed)} failed")
        return result


async def migrate_posts(
    paths: Sequence[Path],
    policy: ErrorPolicy | None = None,
    report: Reporter | None = None,
) -> MigrationReport:
    """Migrate post files using the application database."""
    return await PostsMigrator(policy=policy, report=report).run(paths)
