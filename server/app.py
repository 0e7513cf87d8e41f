"""FastAPI application factory for the gateway's canonicalization API."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.registry import AdapterRegistry
from app.utils.request_fields import ValidationFailure, format_validation_errors

from .config import Settings, get_settings
from .logging_config import configure_logging, logger
from .routes import api_router


def _error(message: str, status_code: int, **extra) -> JSONResponse:
    return JSONResponse({"ok": False, "error": message, **extra}, status_code=status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Map field failures to 400, malformed requests to 422, everything else to 500."""

    @app.exception_handler(ValidationFailure)
    async def _field_validation_handler(request: Request, exc: ValidationFailure):
        logger.debug("field validation failed on %s: %d message(s)", request.url.path, len(exc.messages))
        return _error(exc.message, status.HTTP_400_BAD_REQUEST, detail=exc.messages)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        messages = format_validation_errors(exc.errors(), strip_prefix=True)
        logger.debug("malformed request on %s: %s", request.url.path, messages)
        return _error("Invalid request", status.HTTP_422_UNPROCESSABLE_ENTITY, detail=messages)

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else json.dumps(exc.detail)
        logger.debug("http %d on %s: %s", exc.status_code, request.url.path, detail)
        return _error(detail, exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return _error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "gateway starting (env=%s, adapters=%s, storage=%s)",
        settings.env,
        ",".join(AdapterRegistry.names()),
        "on" if settings.storage_enabled else "off",
    )
    yield
    logger.info("gateway stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application with its routers and error handlers."""
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
