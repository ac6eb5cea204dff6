"""Factories de connectors e do serviço de relay.

Cada factory aceita settings explícitas (testes) ou carrega do ambiente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, create_http_client
from api.connectors.openweather import OpenWeatherClient
from api.connectors.weatherlink import WeatherLinkClient
from app.services import WeatherRelay
from config.settings import (
    get_openweather_settings,
    get_relay_settings,
    get_weatherlink_settings,
)

if TYPE_CHECKING:
    from config.settings import OpenWeatherSettings, RelaySettings, WeatherLinkSettings


def create_upstream_http_client(settings: RelaySettings | None = None) -> HttpClient:
    """Cria cliente HTTP base compartilhado pelos connectors."""
    relay = settings or get_relay_settings()
    return create_http_client(
        timeout_seconds=relay.upstream_timeout_seconds,
        verify_ssl=relay.verify_ssl,
    )


def create_weatherlink_client(
    settings: WeatherLinkSettings | None = None,
    http_client: HttpClient | None = None,
) -> WeatherLinkClient:
    """Cria connector WeatherLink (v1 + v2)."""
    return WeatherLinkClient(
        settings=settings or get_weatherlink_settings(),
        http_client=http_client or create_upstream_http_client(),
    )


def create_openweather_client(
    settings: OpenWeatherSettings | None = None,
    http_client: HttpClient | None = None,
) -> OpenWeatherClient:
    """Cria connector OpenWeather."""
    return OpenWeatherClient(
        settings=settings or get_openweather_settings(),
        http_client=http_client or create_upstream_http_client(),
    )


def create_weather_relay(http_client: HttpClient | None = None) -> WeatherRelay:
    """Cria o serviço de relay com todos os connectors.

    Args:
        http_client: Cliente HTTP base opcional (um único para todos os connectors).
    """
    shared_client = http_client or create_upstream_http_client()
    return WeatherRelay(
        weatherlink=create_weatherlink_client(http_client=shared_client),
        openweather=create_openweather_client(http_client=shared_client),
    )
