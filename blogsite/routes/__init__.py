from blogsite.routes.pages import router as pages_router
from blogsite.routes.posts import router as posts_router
from blogsite.routes.tags import router as tags_router

__all__ = ["pages_router", "posts_router", "tags_router"]
