import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from neekihub.api.responses import error_response
from neekihub.api.v1.routes.ai import router as ai_router
from neekihub.api.v1.routes.daily import router as daily_router
from neekihub.api.v1.routes.duas import router as duas_router
from neekihub.api.v1.routes.hadith import router as hadith_router
from neekihub.api.v1.routes.health import router as health_router
from neekihub.api.v1.routes.prayers import router as prayers_router
from neekihub.api.v1.routes.qibla import router as qibla_router
from neekihub.api.v1.routes.quran import router as quran_router
from neekihub.constants import HTTP_BAD_REQUEST, HTTP_SERVER_ERROR
from neekihub.core.dependencies import get_answer_cache
from neekihub.core.logging_config import configure_logging
from neekihub.core.settings import settings as core_settings
from neekihub.domain.exceptions import InvalidCoordinateError, NeekiHubError
from neekihub.infrastructure.cache.redis_answer_cache import RedisAnswerCache
from neekihub.infrastructure.external_apis.http_client import close_shared_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info(f"Starting up NeekiHub API ({core_settings.ENVIRONMENT})...")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await close_shared_client()
    cache = get_answer_cache()
    if isinstance(cache, RedisAnswerCache):
        await cache.close()


async def neekihub_error_handler(request: Request, exc: NeekiHubError) -> JSONResponse:
    """Translate domain errors into the error envelope."""
    field = exc.field if isinstance(exc, InvalidCoordinateError) else None
    if exc.status_code >= HTTP_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_response(exc.message, field))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request validation errors are client errors: 400 with the first problem."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=HTTP_BAD_REQUEST, content=error_response(message))


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    configure_logging()

    app = FastAPI(
        title="NeekiHub API",
        version="0.1.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=core_settings.CORS_ORIGINS,
        allow_credentials="*" not in core_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NeekiHubError, neekihub_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(qibla_router, prefix="/api")
    app.include_router(prayers_router, prefix="/api")
    app.include_router(ai_router, prefix="/api")
    app.include_router(quran_router, prefix="/api")
    app.include_router(duas_router, prefix="/api")
    app.include_router(hadith_router, prefix="/api")
    app.include_router(daily_router, prefix="/api")
    app.include_router(health_router, prefix="/api")
    return app


app = create_app()
