from logging import getLogger

from starlette.status import HTTP_409_CONFLICT, HTTP_422_UNPROCESSABLE_CONTENT

from blogsite.configs import file_logger
from blogsite.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class IngestionError(BaseAppError):
    """Base exception for post file ingestion errors."""

    def __init__(
        self,
        detail: str = "Post ingestion failed",
        status_code: int = HTTP_422_UNPROCESSABLE_CONTENT,
    ) -> None:
        super().__init__(detail, status_code)


class MalformedDocumentError(IngestionError):
    """Exception raised when a post document has a missing or broken header block."""

    def __init__(
        self,
        detail: str = "Malformed post document",
        line: int | None = None,
    ) -> None:
        if line is not None:
            detail = f"{detail} (line {line + 1})"
        super().__init__(detail)
        self.line = line


class MissingRequiredInputError(IngestionError):
    """Exception raised when an identifying field such as the title is missing."""

    def __init__(
        self,
        detail: str = "Missing required input",
    ) -> None:
        super().__init__(detail)


class PostFileExistsError(IngestionError):
    """Exception raised when a new post file would overwrite an existing one."""

    def __init__(
        self,
        detail: str = "Post file already exists",
    ) -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


ingestion_exception_handler = create_exception_handler(logger)
