"""
Uniform response envelope shared by every endpoint.

    {"status": "success" | "fail" | "error", "data": ..., "message": ..., "errors": [...]}

``fail`` is for caller-fixable problems (400), ``error`` for internal ones (500).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from contacts_api.domain.results import ServiceResult


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


def _body(status: ResponseStatus, data: Any, message: Optional[str], errors: list[str] | None) -> dict:
    return {
        "status": status.value,
        "data": jsonable_encoder(data),
        "message": message,
        "errors": list(errors or []),
    }


def success_body(data: Any = None, message: Optional[str] = None) -> dict:
    return _body(ResponseStatus.SUCCESS, data, message, None)


def fail_body(message: str, errors: list[str] | None = None) -> dict:
    return _body(ResponseStatus.FAIL, None, message, errors)


def error_body(message: str, errors: list[str] | None = None) -> dict:
    return _body(ResponseStatus.ERROR, None, message, errors)


def failure_response(result: ServiceResult) -> JSONResponse:
    """Translate a failed ServiceResult: server-class -> 500/error, anything else -> 400/fail."""
    message = result.message or "An error occurred while processing your request"
    if result.server_error:
        return JSONResponse(error_body(message, result.errors), status_code=500)
    return JSONResponse(fail_body(message, result.errors), status_code=400)


def result_response(
    result: ServiceResult,
    *,
    message: str,
    serialize: Callable[[Any], Any] | None = None,
    status_code: int = 200,
    headers: dict | None = None,
) -> Response:
    if not result.ok:
        return failure_response(result)
    if status_code == 204:
        return Response(status_code=204)
    data = serialize(result.value) if serialize else result.value
    return JSONResponse(success_body(data, message), status_code=status_code, headers=headers)
