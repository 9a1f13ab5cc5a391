from blogsite.errors.base import BaseAppError, create_exception_handler
from blogsite.errors.database import (
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    PersistenceError,
    RecordNotFoundError,
    StorageUnavailableError,
    database_exception_handler,
)
from blogsite.errors.ingestion import (
    IngestionError,
    MalformedDocumentError,
    MissingRequiredInputError,
    PostFileExistsError,
    ingestion_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "IngestionError",
    "MalformedDocumentError",
    "MissingRequiredInputError",
    "PersistenceError",
    "PostFileExistsError",
    "RecordNotFoundError",
    "StorageUnavailableError",
    "create_exception_handler",
    "database_exception_handler",
    "ingestion_exception_handler",
]
