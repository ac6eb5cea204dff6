"""Settings específicas da OpenWeather (One Call API 2.5)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

OPENWEATHER_BASE_URL: str = "https://api.openweathermap.org/data/2.5"
DEFAULT_LATITUDE: float = 42.84655
DEFAULT_LONGITUDE: float = -88.74374
DEFAULT_EXCLUDE: str = "hourly"


@dataclass(frozen=True)
class OpenWeatherSettings:
    """Configurações do provedor de previsão OpenWeather.

    Attributes:
        api_key: appid da OpenWeather
        latitude: Latitude fixa da previsão
        longitude: Longitude fixa da previsão
        exclude: Blocos excluídos da resposta (ex: hourly)
        base_url: URL base da API
    """

    api_key: str = ""
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    exclude: str = DEFAULT_EXCLUDE
    base_url: str = OPENWEATHER_BASE_URL

    @property
    def onecall_endpoint(self) -> str:
        """URL do endpoint One Call."""
        return f"{self.base_url}/onecall"

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.api_key:
            errors.append("OPENWEATHER_API_KEY não configurado")

        if not -90.0 <= self.latitude <= 90.0:
            errors.append("OPENWEATHER_LATITUDE fora do intervalo [-90, 90]")

        if not -180.0 <= self.longitude <= 180.0:
            errors.append("OPENWEATHER_LONGITUDE fora do intervalo [-180, 180]")

        return errors


def _load_from_env() -> OpenWeatherSettings:
    """Carrega OpenWeatherSettings a partir de variáveis de ambiente."""
    return OpenWeatherSettings(
        api_key=os.getenv("OPENWEATHER_API_KEY", ""),
        latitude=float(os.getenv("OPENWEATHER_LATITUDE", str(DEFAULT_LATITUDE))),
        longitude=float(os.getenv("OPENWEATHER_LONGITUDE", str(DEFAULT_LONGITUDE))),
        exclude=os.getenv("OPENWEATHER_EXCLUDE", DEFAULT_EXCLUDE),
        base_url=os.getenv("OPENWEATHER_BASE_URL", OPENWEATHER_BASE_URL),
    )


@lru_cache(maxsize=1)
def get_openweather_settings() -> OpenWeatherSettings:
    """Retorna instância cacheada de OpenWeatherSettings."""
    return _load_from_env()
