from blogsite.services.migrator import (
    FailedPost,
    MigrationReport,
    PostsMigrator,
    collect_post_paths,
    migrate_posts,
)
from blogsite.services.now import load_now_page
from blogsite.services.parser import parse_document, render_document
from blogsite.services.post_creator import PostCreator
from blogsite.services.synchronizer import PostSynchronizer

__all__ = [
    "FailedPost",
    "MigrationReport",
    "PostCreator",
    "PostSynchronizer",
    "PostsMigrator",
    "collect_post_paths",
    "load_now_page",
    "migrate_posts",
    "parse_document",
    "render_document",
]
