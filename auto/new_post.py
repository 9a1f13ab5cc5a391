#!/usr/bin/env python3
"""
New Post Script.

Creates ``<POSTS_DIR>/<YYYY-MM-DD>-<slug>.md`` with a header holding the
title and the current timestamp, ready to be written and migrated.

Usage:
    uv run python auto/new_post.py "Example Post"
    uv run python auto/new_post.py "Example Post" --dir drafts
"""

from argparse import ArgumentParser, Namespace
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from blogsite.configs import settings  # noqa: E402
from blogsite.errors import IngestionError  # noqa: E402
from blogsite.services import PostCreator  # noqa: E402


def parse_args() -> Namespace:
    """Parse command line arguments."""
    parser = ArgumentParser(description="Create a new post file.")
    parser.add_argument("title", nargs="?", default=None, help="Post title")
    parser.add_argument(
        "-d",
        "--dir",
        type=Path,
        default=settings.POSTS_DIR,
        help=f"Directory for the new file (default: {settings.POSTS_DIR})",
    )
    return parser.parse_args()


def main() -> int:
    """
    Create the post file.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error).
    """
    args = parse_args()
    try:
        PostCreator(posts_dir=args.dir, report=print).create(args.title)
    except IngestionError as e:
        print(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys_exit(main())
