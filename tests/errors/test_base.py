# tests/errors/test_base.py
"""Tests for blogsite/errors/base.py module."""

from unittest.mock import MagicMock

import orjson
import pytest

from blogsite.errors import (
    BaseAppError,
    MalformedDocumentError,
    StorageUnavailableError,
    create_exception_handler,
)


def make_request(ip: str, path: str) -> MagicMock:
    request = MagicMock()
    request.client.host = ip
    request.url.path = path
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns the detail."""
        assert str(BaseAppError(detail="Test error")) == "Test error"

    def test_to_content_includes_extra_attributes(self) -> None:
        error = MalformedDocumentError("Bad header", line=0)
        assert error.to_content() == {"detail": "Bad header (line 1)", "line": 0}


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self) -> None:
        """Test handler with BaseAppError exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(
            make_request("192.168.1.1", "/blog/missing"),
            BaseAppError(detail="Test error", status_code=400),
        )

        assert response.status_code == 400
        assert response.body == b'{"detail":"Test error"}'
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /blog/missing",
        )

    @pytest.mark.asyncio
    async def test_handler_includes_extra_attributes(self) -> None:
        """Test attributes set by subclasses are added to the response body."""
        handler = create_exception_handler(MagicMock())

        response = await handler(
            make_request("127.0.0.1", "/ingest"),
            MalformedDocumentError("Bad header", line=2),
        )

        assert response.status_code == 422
        assert orjson.loads(response.body) == {"detail": "Bad header (line 3)", "line": 2}

    @pytest.mark.asyncio
    async def test_handler_with_generic_exception(self) -> None:
        """Test handler with generic Python exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(
            make_request("127.0.0.1", "/api/error"),
            ValueError("Something went wrong"),
        )

        assert response.status_code == 500
        assert orjson.loads(response.body) == {"detail": "Internal Server Error"}
        logger.error.assert_called_once()
        logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_server_errors_are_logged_as_errors(self) -> None:
        """Test 5xx application errors are logged at error level."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(
            make_request("127.0.0.1", "/blog"),
            StorageUnavailableError(),
        )

        assert response.status_code == 503
        logger.error.assert_called_once_with(
            "Post storage is unavailable for ip: 127.0.0.1 for endpoint /blog",
        )
        logger.warning.assert_not_called()
