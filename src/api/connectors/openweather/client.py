"""Cliente OpenWeather (One Call 2.5) para previsão em coordenada fixa."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, UpstreamRequest

if TYPE_CHECKING:
    import httpx

    from config.settings import OpenWeatherSettings

PROVIDER = "openweather"


class OpenWeatherClient:
    """Monta e executa a chamada de previsão."""

    def __init__(self, settings: OpenWeatherSettings, http_client: HttpClient) -> None:
        self._settings = settings
        self._http_client = http_client

    def build_forecast_request(self) -> UpstreamRequest:
        """GET {base}/onecall?lat=&lon=&exclude=&appid="""
        return UpstreamRequest(
            provider=PROVIDER,
            endpoint=self._settings.onecall_endpoint,
            query=(
                ("lat", str(self._settings.latitude)),
                ("lon", str(self._settings.longitude)),
                ("exclude", self._settings.exclude),
                ("appid", self._settings.api_key),
            ),
        )

    async def fetch_forecast(self) -> httpx.Response:
        return await self._http_client.get(self.build_forecast_request())
