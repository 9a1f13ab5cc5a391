# blogsite/main.py

"""Blog backend: posts, tags and pages served behind a CDN."""

from fastapi import FastAPI

from blogsite.configs import settings
from blogsite.errors import (
    DatabaseError,
    IngestionError,
    database_exception_handler,
    ingestion_exception_handler,
)
from blogsite.middleware import LegacyRedirectMiddleware, LoggingMiddleware, lifespan
from blogsite.routes import pages_router, posts_router, tags_router

app = FastAPI(
    title=settings.APP_NAME,
    description="Personal blog API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

app.add_middleware(LoggingMiddleware)
# Added last so it runs first, before logging and routing
app.add_middleware(LegacyRedirectMiddleware)

routes = [posts_router, tags_router, pages_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (DatabaseError, database_exception_handler),
    (IngestionError, ingestion_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]
