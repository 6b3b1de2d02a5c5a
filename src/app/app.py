"""Entrypoint da aplicação de agendamento com consultores.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 3000
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_store_settings
from utils.errors import SchedulingError, StoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida configurações.
    Shutdown: fecha o cliente Redis, se o backend usar um.
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service_name})
    if get_store_settings().backend == "redis":
        from app.bootstrap.clients import create_async_redis_client

        await create_async_redis_client().aclose()


async def _correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
    finally:
        reset_correlation_id(token)
    return response


async def _scheduling_error_handler(request: Request, exc: SchedulingError) -> JSONResponse:
    logger.info(
        "request_rejected",
        extra={
            "component": "http",
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # O corpo original nunca volta ao cliente; so o tipo do erro vai para o log.
    logger.info(
        "request_body_invalid",
        extra={
            "component": "http",
            "path": request.url.path,
            "status_code": 400,
            "error_type": type(exc).__name__,
            "error_count": len(exc.errors()),
        },
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def _store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "store_unavailable",
        extra={"component": "http", "path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=503, content={"error": "Storage unavailable"})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Agenda Advisors",
        description="Agendamento de reunioes com consultores via Google Calendar",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Paginas de booking/setup sao servidas de outro dominio
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(_correlation_middleware)

    fastapi_app.add_exception_handler(SchedulingError, _scheduling_error_handler)
    fastapi_app.add_exception_handler(StoreUnavailableError, _store_unavailable_handler)
    fastapi_app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("app_starting_dev_mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "3000")),
        reload=True,
    )


if __name__ == "__main__":
    main()
