"""FastAPI application entrypoint.

All API routes are prefixed /api. The landing page is served at / and its
assets under /static. Auto-generated OpenAPI docs at /docs.

The MyMemoryProvider and the TranslationGateway wrapping it are created once
during the lifespan and stored on app.state for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from pathlib import Path
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from lingoproxy import __version__
from lingoproxy.api.v1.health import router as health_router
from lingoproxy.api.v1.translate import router as translate_router
from lingoproxy.core.config import settings
from lingoproxy.core.exceptions import (
    InternalServerError,
    LingoProxyError,
    ValidationError,
)
from lingoproxy.services.language.catalog import catalog
from lingoproxy.services.translation.gateway import TranslationGateway
from lingoproxy.services.translation.mymemory import MyMemoryProvider

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Creates the singleton provider + gateway and attaches the gateway to
    app.state. Retrieved in request handlers via Depends() in
    lingoproxy/api/deps.py.
    """
    logger.info("app_startup", env=settings.app_env, port=settings.port)

    provider = MyMemoryProvider(
        base_url=settings.provider_url,
        timeout_seconds=settings.provider_timeout_seconds,
    )
    app.state.translation_gateway = TranslationGateway(provider=provider, catalog=catalog)

    logger.info("app_providers_ready", languages=len(catalog))
    yield

    logger.info("app_shutdown")


app = FastAPI(
    title="LingoProxy — Translation API",
    description="Translation proxy and heuristic language detection.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LingoProxyError)
async def lingoproxy_error_handler(request: Request, exc: LingoProxyError) -> JSONResponse:
    """Structured error response for all LingoProxy exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Unparseable bodies and wrong field types are client errors (400)."""
    logger.info("request_body_invalid", path=request.url.path, errors=len(exc.errors()))
    error = ValidationError(message="Invalid request body")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
    error = InternalServerError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


app.include_router(health_router, prefix="/api")
app.include_router(translate_router, prefix="/api")

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
async def landing_page() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html")


def run() -> None:
    """Console entrypoint: serve the app with uvicorn on settings.host:port."""
    logger.info("translation_server_starting", url=f"http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
