"""
Unit tests for server exception handlers.

Tests cover the global 500 handler, validation error messages and
service-layer errors.
"""

from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from pydantic import BaseModel, field_validator

from fivimedia_llc.core.errors import AuthenticationError, NotFoundError, ServiceError, ValidationError
from fivimedia_llc.server.exception_handlers import setup_exception_handlers
from fivimedia_llc.server.exception_handlers.global_handler import global_exception_handler
from fivimedia_llc.server.exception_handlers.validation_handler import (
    first_error_message,
    service_error_handler,
)


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.fixture
    def mock_request(self):
        """Create a mock request object."""
        request = Mock(spec=Request)
        request.method = "POST"
        request.url.path = "/api/v1/orders"
        request.query_params = {}
        request.client = Mock()
        request.client.host = "127.0.0.1"
        return request

    @pytest.mark.asyncio
    async def test_logs_error_with_context(self, mock_request):
        exc = ValueError("Test error")

        with patch("fivimedia_llc.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["path"] == "/api/v1/orders"

    @pytest.mark.asyncio
    async def test_returns_500_with_error_id(self, mock_request):
        exc = RuntimeError("database went away")

        with patch("fivimedia_llc.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert response.status_code == 500
        body = response.body.decode()
        assert '"detail":"Internal server error"' in body
        assert '"error_type":"RuntimeError"' in body
        assert "database went away" not in body

    @pytest.mark.asyncio
    async def test_error_ids_are_unique(self, mock_request):
        with patch("fivimedia_llc.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, ValueError("a"))
            await global_exception_handler(mock_request, ValueError("b"))

        first, second = (c[1]["extra"]["error_id"] for c in mock_logger.error.call_args_list)
        assert first != second
        assert len(first) == 12

    @pytest.mark.asyncio
    async def test_request_without_client(self, mock_request):
        mock_request.client = None

        with patch("fivimedia_llc.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await global_exception_handler(mock_request, KeyError("x"))

        assert response.status_code == 500
        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"

    @pytest.mark.asyncio
    async def test_reports_error_to_monitoring(self, mock_request):
        with (
            patch("fivimedia_llc.server.exception_handlers.global_handler.logger"),
            patch("fivimedia_llc.server.exception_handlers.global_handler.log_error") as mock_log_error,
        ):
            await global_exception_handler(mock_request, ValueError("boom"))

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[0][:2] == ("ValueError", "boom")


class TestFirstErrorMessage:
    def test_no_errors(self):
        assert first_error_message([]) == "Invalid input"

    def test_custom_validator_message_is_returned_as_written(self):
        errors = [
            {
                "type": "value_error",
                "loc": ("body", "customer", "email"),
                "msg": "Value error, Invalid email address",
                "ctx": {"error": ValueError("Invalid email address")},
            }
        ]

        assert first_error_message(errors) == "Invalid email address"

    def test_builtin_message_is_prefixed_with_field(self):
        errors = [{"type": "missing", "loc": ("body", "customer", "name"), "msg": "Field required"}]

        assert first_error_message(errors) == "customer.name: Field required"

    def test_invalid_json(self):
        errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error", "ctx": {"error": "x"}}]

        assert first_error_message(errors) == "Invalid JSON body"

    def test_only_first_error_is_used(self):
        errors = [
            {"type": "missing", "loc": ("query", "page"), "msg": "Field required"},
            {"type": "missing", "loc": ("query", "limit"), "msg": "Field required"},
        ]

        assert first_error_message(errors) == "page: Field required"


class TestServiceErrorHandler:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc,status_code,detail",
        [
            (ValidationError("Invalid state"), 400, "Invalid state"),
            (NotFoundError("Order"), 404, "Order not found"),
            (AuthenticationError(), 401, "Unauthorized"),
            (ServiceError("Something is off"), 400, "Something is off"),
        ],
    )
    async def test_status_and_detail(self, exc, status_code, detail):
        request = Mock(spec=Request)
        request.method = "GET"
        request.url.path = "/api/v1/anything"

        response = await service_error_handler(request, exc)

        assert response.status_code == status_code
        assert response.body.decode() == f'{{"detail":"{detail}"}}'


class _Signup(BaseModel):
    email: str
    age: int

    @field_validator("email")
    @classmethod
    def _email(cls, value):
        if "@" not in value:
            raise ValueError("Invalid email address")
        return value


class TestSetupExceptionHandlers:
    @pytest.fixture
    def app(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.post("/signup")
        async def signup(payload: _Signup):
            return {"ok": True}

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Order")

        @app.get("/crash")
        async def crash():
            raise RuntimeError("boom")

        return app

    def test_registers_all_handlers(self, app):
        assert RequestValidationError in app.exception_handlers
        assert ServiceError in app.exception_handlers
        assert Exception in app.exception_handlers

    def test_validation_error_is_400(self, app):
        client = TestClient(app)

        response = client.post("/signup", json={"email": "nope", "age": 30})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid email address"}

    def test_service_error(self, app):
        client = TestClient(app)

        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Order not found"}

    def test_unhandled_error(self, app):
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/crash")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
        assert response.json()["error_type"] == "RuntimeError"
