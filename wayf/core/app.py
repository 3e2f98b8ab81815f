"""FastAPI application factory for the WAYF connector."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from wayf.api.routes_wayf import router as wayf_router
from wayf.client.wayf_client import WayfClient
from wayf.core.errors import (
    InvalidAuthorizationError,
    MissingAuthorizationError,
    SignatureValidationError,
    TransportError,
)
from wayf.core.settings import WayfSettings

HTTP_UNAUTHORIZED = 401
HTTP_BAD_GATEWAY = 502


async def _authentication_failed(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        {"error": "invalid_token", "error_description": str(exc)},
        status_code=HTTP_UNAUTHORIZED,
    )


async def _upstream_failed(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        {"error": "upstream_unavailable", "error_description": str(exc)},
        status_code=HTTP_BAD_GATEWAY,
    )


def create_app(settings: WayfSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or WayfSettings()
    logging.getLogger("wayf").setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with httpx.AsyncClient(timeout=settings.http_timeout) as http:
            app.state.wayf_client = WayfClient(http, settings)
            yield

    app = FastAPI(
        title="WAYF Connector",
        version="0.1.0",
        lifespan=lifespan,
    )

    for auth_error in (
        MissingAuthorizationError,
        InvalidAuthorizationError,
        SignatureValidationError,
    ):
        app.add_exception_handler(auth_error, _authentication_failed)
    app.add_exception_handler(TransportError, _upstream_failed)

    app.include_router(wayf_router)

    return app
