"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from butta_la_pasta.api.models import ErrorResponse, PastaResponse
from butta_la_pasta.app_logging import configure_logging
from butta_la_pasta.containers import AppContainer
from butta_la_pasta.domain.errors import PersistenceError, ResolutionNotFoundError

NOT_FOUND_MESSAGE = "The requested resource could not be found"
SERVER_ERROR_MESSAGE = (
    "The server encountered a problem and could not process your request"
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def log_access(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error: method=%s path=%s", request.method, request.url.path
            )
            response = _error_response(500, SERVER_ERROR_MESSAGE)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Request: method=%s path=%s status=%s duration_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.exception_handler(ResolutionNotFoundError)
    async def not_found(
        request: Request, exc: ResolutionNotFoundError
    ) -> JSONResponse:
        return _error_response(404, NOT_FOUND_MESSAGE)

    @app.exception_handler(PersistenceError)
    async def server_error(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("Server error: path=%s error=%s", request.url.path, exc)
        return _error_response(500, SERVER_ERROR_MESSAGE)

    @app.get("/status")
    async def status() -> dict[str, str]:
        """Liveness endpoint."""
        return {"Status": "OK"}

    @app.get(
        "/pasta/{barcode}",
        response_model=PastaResponse,
        response_model_exclude_none=True,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def get_pasta(barcode: str, request: Request) -> PastaResponse:
        """Return cooking times for a barcode, resolving unknown products."""
        state_container: AppContainer = request.app.state.container
        profile = await state_container.pasta_resolver.resolve(barcode)
        return PastaResponse.from_profile(profile)

    return app


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"Error": message})
