"""FastAPI application entrypoint."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from brazucas import __version__
from brazucas.config import get_settings
from brazucas.db import dispose_engine
from brazucas.errors import ServiceError
from brazucas.logging_config import configure_logging, get_logger
from brazucas.middleware.correlation_id import CorrelationIdMiddleware
from brazucas.middleware.rate_limit import RateLimitMiddleware
from brazucas.routers import (
    admin_stats_router,
    ads_router,
    api_health_router,
    auth_router,
    categories_router,
    health_router,
    news_router,
    status_router,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown: logging, then close the DB pool."""
    configure_logging()
    logger.info("app_started", version=__version__, env=get_settings().app_env)
    yield
    await dispose_engine()
    logger.info("app_shutdown")


def _error_body(message: str, code: str | None = None) -> dict:
    body = {"success": False, "error": message}
    if code:
        body["code"] = code
    return body


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as "field: message"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    msg = str(first.get("msg", "Invalid value"))
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f"{'.'.join(loc)}: {msg}" if loc else msg


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request.service_error", path=request.url.path, code=exc.code, error=exc.message)
    else:
        logger.info("request.rejected", path=request.url.path, status=exc.status_code, code=exc.code)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.code))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content=_error_body(_validation_message(exc), "invalid_input"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request.unhandled_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content=_error_body("Internal server error"))


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Brazucas em Cork API",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health_router)
    app.include_router(api_health_router)
    app.include_router(auth_router)
    app.include_router(news_router)
    app.include_router(ads_router)
    app.include_router(categories_router)
    app.include_router(status_router)
    app.include_router(admin_stats_router)

    @app.get("/")
    def root() -> dict[str, str]:
        """App name and version."""
        return {"name": "brazucas-api", "version": __version__}

    return app


app = create_app()
