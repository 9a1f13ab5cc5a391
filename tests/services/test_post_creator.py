# tests/services/test_post_creator.py
"""Tests for blogsite/services/post_creator.py module."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from blogsite.errors import MissingRequiredInputError, PostFileExistsError
from blogsite.services.parser import parse_document
from blogsite.services.post_creator import PostCreator, post_filename, post_template

NOW = datetime(2017, 1, 1, 9, 30, 15, tzinfo=UTC)


@pytest.fixture
def creator(tmp_path: Path) -> PostCreator:
    return PostCreator(posts_dir=tmp_path / "posts", clock=lambda: NOW, report=lambda _: None)


def test_post_filename() -> None:
    assert post_filename("Example Post", NOW) == "2017-01-01-example-post.md"


def test_post_template() -> None:
    assert post_template("Example Post", NOW) == (
        "---\n"
        "layout: post\n"
        "title: Example Post\n"
        "date: 2017-01-01 09:30:15\n"
        "description:\n"
        "tags:\n"
        "---\n"
    )


class TestPostCreator:
    """Tests for PostCreator.create."""

    def test_creates_parseable_file(self, creator: PostCreator, tmp_path: Path) -> None:
        lines: list[str] = []
        creator.report = lines.append

        path = creator.create("Example Post")

        assert path == tmp_path / "posts" / "2017-01-01-example-post.md"
        assert lines == [f"{path} created."]
        document = parse_document(path.read_text(encoding="utf-8"))
        assert document.title == "Example Post"
        assert document.date == "2017-01-01 09:30:15"
        assert document.tags == []
        assert document.body == "\n"

    @pytest.mark.parametrize("title", [None, "", "  "])
    def test_requires_title(self, creator: PostCreator, title: str | None) -> None:
        with pytest.raises(MissingRequiredInputError, match="Please specify post's title"):
            creator.create(title)

    def test_does_not_overwrite(self, creator: PostCreator) -> None:
        path = creator.create("Example Post")
        path.write_text("edited", encoding="utf-8")

        with pytest.raises(PostFileExistsError):
            creator.create("Example Post")
        assert path.read_text(encoding="utf-8") == "edited"
