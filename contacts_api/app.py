"""
FastAPI application for the contacts/funds API.

``create_app`` wires settings, logging, the SQL store, the services and the
routers together. ``app`` is built at import time so uvicorn can find it::

    uvicorn contacts_api.app:app
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contacts_api.core.config import get_settings
from contacts_api.core.envelope import error_body, fail_body
from contacts_api.core.logging_config import setup_logging
from contacts_api.core.rate_limiter import RateLimitMiddleware
from contacts_api.db.create_tables import init_db
from contacts_api.domain.results import first_line
from contacts_api.repositories.contact_repository import ContactRepository
from contacts_api.repositories.fund_repository import FundRepository
from contacts_api.routers import contacts as contacts_router
from contacts_api.routers import funds as funds_router
from contacts_api.services.contact_service import ContactService
from contacts_api.services.fund_service import FundService

logger = logging.getLogger(__name__)


def _format_validation_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    message = error.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {message}" if loc else message


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        details = [f"The request contains malformed JSON: {err.get('msg', '')}" for err in errors]
        return JSONResponse(fail_body("Invalid JSON format", details), status_code=400)
    return JSONResponse(
        fail_body("Validation failed", [_format_validation_error(err) for err in errors]),
        status_code=400,
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(fail_body(message), status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        error_body("An error occurred while processing your request", [first_line(exc)]),
        status_code=500,
    )


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    init_db(seed=settings.seed_data)

    app = FastAPI(title="Contacts & Funds API")
    app.state.contact_service = ContactService(ContactRepository())
    app.state.fund_service = FundService(FundRepository(), ContactRepository())

    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
    app.add_middleware(
        RateLimitMiddleware,
        limit=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )

    app.include_router(contacts_router.router, prefix=settings.api_prefix)
    app.include_router(funds_router.router, prefix=settings.api_prefix)

    logger.info("Contacts API ready (env=%s, prefix=%s)", settings.app_env, settings.api_prefix or "/")
    return app


app = create_app()
