"""Entrypoint da aplicação weatherlink-relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.responses import relay_response
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_weather_relay
from app.observability import (
    CORRELATION_ID_HEADER,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings
from utils.errors import ConfigurationError, UpstreamError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from app.services import WeatherRelay

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

# Método não suportado num path conhecido também responde como rota inexistente
_NOT_FOUND_STATUSES = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    """
    logger.info("app_starting", extra={"service": SERVICE_NAME})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE_NAME})


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga X-Correlation-ID (ou gera um) para os logs da requisição."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        return await call_next(request)
    finally:
        reset_correlation_id(token)


async def not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Rota/método não mapeado: 404 sem corpo, mesmos headers do relay."""
    if exc.status_code not in _NOT_FOUND_STATUSES:
        return await http_exception_handler(request, exc)
    logger.info(
        "route_not_found",
        extra={"method": request.method, "path": request.url.path},
    )
    return relay_response(status_code=status.HTTP_404_NOT_FOUND)


async def upstream_error_handler(request: Request, exc: UpstreamError) -> Response:
    """Falha upstream: 502 opaco (sem corpo estruturado)."""
    logger.error(
        "upstream_failed",
        extra={
            "path": request.url.path,
            "provider": exc.provider,
            "error_type": type(exc).__name__,
            "reason": str(exc),
        },
    )
    return relay_response(status_code=status.HTTP_502_BAD_GATEWAY)


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> Response:
    """Configuração ausente detectada ao preparar a chamada: 500 opaco."""
    logger.error(
        "relay_misconfigured",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "reason": str(exc),
        },
    )
    return relay_response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(weather_relay: WeatherRelay | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        weather_relay: Relay já construído (testes). Se None, usa os
            connectors reais configurados pelo ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="weatherlink-relay",
        description="Relay HTTP para WeatherLink e OpenWeather",
        version="1.0.0",
        debug=get_base_settings().debug,
        lifespan=lifespan,
        # Somente as rotas do relay respondem; qualquer outro path é 404
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # Relay construído uma vez por processo; parâmetros assinados são por requisição
    fastapi_app.state.weather_relay = weather_relay or create_weather_relay()

    # CORS: Access-Control-Allow-Origin vem no envelope de toda resposta;
    # preflight OPTIONS cai no 404 como qualquer outro método
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.add_exception_handler(StarletteHTTPException, not_found_handler)
    fastapi_app.add_exception_handler(UpstreamError, upstream_error_handler)
    fastapi_app.add_exception_handler(ConfigurationError, configuration_error_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": SERVICE_NAME})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting weatherlink-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
