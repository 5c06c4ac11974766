from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Receive, Scope, Send
from starlette.websockets import WebSocketClose

from balance_api.config import Settings
from balance_api.exceptions import NotFoundError, RequestFailure, resolve_message, resolve_status
from balance_api.logging import configure_logging, get_logger
from balance_api.middleware import RequestIDMiddleware
from balance_api.routers import balance, health
from balance_api.schemas.envelope import build_error, envelope_json

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log start and stop. The service holds no connections to open or close."""
    settings: Settings = app.state.settings
    logger.info("service_started", host=settings.host, port=settings.port)
    yield
    logger.info("service_stopped")


def _failure_response(
    status: object,
    message: object,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Resolve status/message with defaults and build the error envelope response."""
    return JSONResponse(
        status_code=resolve_status(status),
        content=envelope_json(build_error(resolve_message(message))),
        headers=headers,
    )


async def request_failure_handler(request: Request, exc: RequestFailure) -> JSONResponse:
    """Classified failures: status and message pass through, gaps get defaults."""
    response = _failure_response(exc.status, exc.message)
    log = logger.error if response.status_code >= 500 else logger.warning
    log(
        "request_failed",
        status_code=response.status_code,
        error=resolve_message(exc.message),
        path=request.url.path,
    )
    return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP errors raised by the framework or by handlers.

    A 405 means the path exists but not for this method; it is reported
    like any other unmatched route.
    """
    if exc.status_code == 405:
        return await request_failure_handler(request, NotFoundError("Route not found"))
    logger.warning(
        "http_error",
        status_code=exc.status_code,
        error=exc.detail,
        path=request.url.path,
    )
    return _failure_response(exc.status_code, exc.detail, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request validation errors become a 422 with a generic message."""
    logger.warning("validation_error", errors=exc.errors(), path=request.url.path)
    return _failure_response(422, "Validation error")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes request_id from context)
    - Returns the generic 500 envelope; exception text never reaches the client
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return _failure_response(None, None)


async def route_not_found(scope: Scope, receive: Receive, send: Send) -> None:
    """Router fallback: any request no route matched becomes a 404 failure."""
    if scope["type"] == "websocket":
        await WebSocketClose()(scope, receive, send)
        return
    raise NotFoundError("Route not found")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a fully wired application.

    Each call returns an independent app; nothing is shared between them
    except the process-wide logging configuration.
    """
    settings = settings or Settings()
    configure_logging(settings)

    # No trailing-slash redirects: "/balance/" is an unmatched route like any other
    app = FastAPI(title="Balance API", lifespan=lifespan, redirect_slashes=False)
    app.state.settings = settings
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestFailure, request_failure_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(balance.router)
    app.include_router(health.router)
    app.router.default = route_not_found

    return app


def run() -> None:
    """Serve the app with uvicorn. Entry point of the ``balance-api`` script."""
    settings = Settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
        access_log=False,  # RequestIDMiddleware logs request_completed instead
        log_config=None,  # keep the structlog setup from configure_logging
    )
