from blogsite.schemas.now import NowPage
from blogsite.schemas.post import PostDocument, PostListResponse, PostResponse, TagResponse

__all__ = [
    "NowPage",
    "PostDocument",
    "PostListResponse",
    "PostResponse",
    "TagResponse",
]
