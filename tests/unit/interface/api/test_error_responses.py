"""Unit tests for HTTP error bodies and exception handlers."""

import json

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from tally.interface.api.app import (
    _describe_error,
    _http_exception_handler,
    _validation_exception_handler,
)
from tally.interface.error import error_response


def make_request(method: str = "POST", path: str = "/vote") -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


def body_of(response) -> dict:
    return json.loads(response.body)


class TestErrorResponse:
    def test_wraps_message(self):
        response = error_response(409, "nope")

        assert response.status_code == 409
        assert body_of(response) == {"error": "nope"}
        assert response.media_type == "application/json"


class TestHttpExceptionHandler:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 405])
    async def test_not_found_and_method_not_allowed_become_404(self, status_code):
        response = await _http_exception_handler(
            make_request("GET"), StarletteHTTPException(status_code=status_code)
        )

        assert response.status_code == 404
        assert body_of(response) == {"error": "Not Found"}

    @pytest.mark.asyncio
    async def test_other_statuses_keep_their_detail(self):
        response = await _http_exception_handler(
            make_request(), StarletteHTTPException(status_code=413, detail="Too big")
        )

        assert response.status_code == 413
        assert body_of(response) == {"error": "Too big"}


class TestValidationExceptionHandler:
    def test_describe_error_names_body_field(self):
        error = {"loc": ("body", "submissionId"), "msg": "Field required"}

        assert _describe_error(error) == "submissionId"

    def test_describe_error_falls_back_to_message(self):
        error = {"loc": ("body", 0), "msg": "JSON decode error"}

        assert _describe_error(error) == "JSON decode error"

    @pytest.mark.asyncio
    async def test_lists_every_invalid_field(self):
        exc = RequestValidationError(
            [
                {"loc": ("body", "slackID"), "msg": "Field required", "type": "missing"},
                {"loc": ("body", "category"), "msg": "Field required", "type": "missing"},
            ]
        )

        response = await _validation_exception_handler(make_request(), exc)

        assert response.status_code == 400
        assert body_of(response) == {
            "error": "Invalid vote request: slackID, category"
        }
