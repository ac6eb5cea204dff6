"""Endpoints do relay de clima.

Endpoints (somente GET, match exato de path):
- GET /: condições atuais (WeatherLink v2, assinado)
- GET /historic: janela histórica do dia (WeatherLink v2, assinado)
- GET /station-data: dados NOAA da estação (WeatherLink v1)
- GET /forecast: previsão em coordenada fixa (OpenWeather)

O status upstream não é traduzido: o corpo normalizado sai sempre com 200.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from api.routes.responses import relay_response

if TYPE_CHECKING:
    from app.services import WeatherRelay


router = APIRouter()


def _get_weather_relay(request: Request) -> WeatherRelay:
    """Obtém o relay construído pelo composition root."""
    return request.app.state.weather_relay


@router.get("/")
async def current_weather(request: Request) -> Response:
    """Condições atuais da estação."""
    body = await _get_weather_relay(request).current_weather()
    return relay_response(body)


@router.get("/historic")
async def historic_weather(request: Request) -> Response:
    """Condições históricas desde meia-noite local + offset."""
    body = await _get_weather_relay(request).historic_weather()
    return relay_response(body)


@router.get("/station-data")
async def station_data(request: Request) -> Response:
    """Dados da estação pela API v1 legada."""
    body = await _get_weather_relay(request).station_data()
    return relay_response(body)


@router.get("/forecast")
async def forecast(request: Request) -> Response:
    """Previsão do provedor OpenWeather."""
    body = await _get_weather_relay(request).forecast()
    return relay_response(body)
