from blogsite.middleware.middleware import LoggingMiddleware, lifespan
from blogsite.middleware.redirects import LegacyRedirectMiddleware

__all__ = ["LegacyRedirectMiddleware", "LoggingMiddleware", "lifespan"]
