"""Serviço de relay: uma chamada upstream por requisição, corpo normalizado."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.openweather import PROVIDER as OPENWEATHER_PROVIDER
from api.connectors.weatherlink import PROVIDER_V1, PROVIDER_V2
from api.normalizers import normalize

if TYPE_CHECKING:
    from api.connectors.openweather import OpenWeatherClient
    from api.connectors.weatherlink import WeatherLinkClient


class WeatherRelay:
    """Orquestra connectors e normalizador para cada rota do relay."""

    def __init__(
        self,
        weatherlink: WeatherLinkClient,
        openweather: OpenWeatherClient,
    ) -> None:
        self._weatherlink = weatherlink
        self._openweather = openweather

    async def current_weather(self) -> str:
        return normalize(await self._weatherlink.fetch_current(), PROVIDER_V2)

    async def historic_weather(self) -> str:
        return normalize(await self._weatherlink.fetch_historic(), PROVIDER_V2)

    async def station_data(self) -> str:
        return normalize(await self._weatherlink.fetch_station_data(), PROVIDER_V1)

    async def forecast(self) -> str:
        return normalize(await self._openweather.fetch_forecast(), OPENWEATHER_PROVIDER)
