#!/usr/bin/env python3
"""
Migrate Posts Script.

Reads post files and creates or updates the matching posts in the
database, matched by title. Re-running the script on the same files updates
the posts in place.

Usage:
    uv run python auto/migrate_posts.py
    uv run python auto/migrate_posts.py posts/2017-01-01-example-post.md
    uv run python auto/migrate_posts.py --dir posts --continue-on-error

Environment Variables:
    DATABASE_URL: Target database (default: sqlite+aiosqlite:///./blog.db)
    POSTS_DIR: Directory migrated when no paths are given (default: posts)
    INGEST_ERROR_POLICY: fail_fast or continue (default: fail_fast)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from blogsite.configs import ErrorPolicy, settings  # noqa: E402
from blogsite.db import close_db, init_db  # noqa: E402
from blogsite.errors import BaseAppError  # noqa: E402
from blogsite.monitoring import configure_logging  # noqa: E402
from blogsite.services import collect_post_paths, migrate_posts  # noqa: E402


def parse_args() -> Namespace:
    """
    Parse command line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with defaults applied.
    """
    parser = ArgumentParser(
        description="Migrate post files into the database.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Every post in POSTS_DIR
  uv run python auto/migrate_posts.py

  # Selected files, in the given order
  uv run python auto/migrate_posts.py posts/2017-01-01-example-post.md posts/2017-02-01-other.md

  # Keep going when a file is broken
  uv run python auto/migrate_posts.py --dir posts --continue-on-error
        """,
    )

    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Post files to migrate (default: every *.md file in --dir)",
    )
    parser.add_argument(
        "-d",
        "--dir",
        type=Path,
        default=settings.POSTS_DIR,
        help=f"Directory to migrate when no paths are given (default: {settings.POSTS_DIR})",
    )
    parser.add_argument(
        "--continue-on-error",
        "-c",
        action="store_true",
        help="Report failing files and migrate the rest instead of stopping",
    )

    return parser.parse_args()


async def main() -> int:
    """
    Run the migration.

    Returns
    -------
    int
        Exit code (0 when every file was migrated, 1 otherwise).
    """
    args = parse_args()
    configure_logging()

    paths = args.paths or collect_post_paths(args.dir)
    if not paths:
        print(f"No post files found in {args.dir}")
        return 0

    policy = ErrorPolicy.CONTINUE if args.continue_on_error else settings.INGEST_ERROR_POLICY

    try:
        await init_db()
        report = await migrate_posts(paths, policy=policy, report=print)
    except (BaseAppError, OSError, UnicodeDecodeError) as e:
        print(f"\n❌ Error: {e}")
        return 1
    finally:
        await close_db()

    if not report.ok:
        print(f"\n❌ {len(report.failed)} of {len(paths)} posts failed:")
        for failure in report.failed:
            print(f"   {failure.path}: {failure.error}")
        return 1

    print(f"\n✅ Migrated {len(report.migrated)} posts.")
    return 0


if __name__ == "__main__":
    exit_code = asyncio_run(main())
    sys_exit(exit_code)
