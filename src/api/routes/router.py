"""Agregador de rotas — registra os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.weather.router import router as weather_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Relay de clima (sem prefixo: / é a rota de condições atuais)
    api_router.include_router(weather_router, tags=["weather"])

    return api_router
