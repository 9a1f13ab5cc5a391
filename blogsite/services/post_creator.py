"""Scaffold new post files."""

from datetime import datetime
from logging import getLogger
from pathlib import Path

from blogsite.configs import POST_DATE_FORMAT, POST_FILENAME_DATE_FORMAT, file_logger, settings
from blogsite.errors.ingestion import MissingRequiredInputError, PostFileExistsError
from blogsite.schemas.post import PostDocument
from blogsite.services.migrator import Reporter
from blogsite.services.parser import render_document
from blogsite.services.synchronizer import Clock
from blogsite.utils.helpers import slugify
from blogsite.utils.timezone import utc_now

logger = file_logger(getLogger(__name__))


def post_filename(title: str, now: datetime) -> str:
    """Return ``<YYYY-MM-DD>-<slug>.md`` for a title."""
    return f"{now.strftime(POST_FILENAME_DATE_FORMAT)}-{slugify(title)}.md"


def post_template(title: str, now: datetime) -> str:
    """Return the header block of a new post, with empty description and tags."""
    document = PostDocument(
        layout="post",
        title=title,
        date=now.strftime(POST_DATE_FORMAT),
        body="",
    )
    # no separator line until there is a body
    return render_document(document).removesuffix("\n")


class PostCreator:
    """
    Create an empty post file with a filled-in header.

    The file is named after the clock's current date and the title; its
    header carries the title and the full timestamp. Description and tags
    are left empty for the author.
    """

    def __init__(
        self,
        posts_dir: Path | None = None,
        clock: Clock = utc_now,
        report: Reporter | None = None,
    ) -> None:
        self.posts_dir = posts_dir or settings.POSTS_DIR
        self.clock = clock
        self.report = report or logger.info

    def create(self, title: str | None) -> Path:
        """
        Write the post file.

        Args:
            title: Post title

        Returns:
            Path: The created file

        Raises:
            MissingRequiredInputError: If no title is given
            PostFileExistsError: If the file already exists
        """
        if not title or not title.strip():
            mssg = "Please specify post's title"
            raise MissingRequiredInputError(mssg)

        now = self.clock()
        path = self.posts_dir / post_filename(title, now)
        if path.exists():
            mssg = f"{path} already exists"
            raise PostFileExistsError(mssg)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(post_template(title, now), encoding="utf-8")
        self.report(f"{path} created.")
        return path
