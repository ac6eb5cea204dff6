"""Connector OpenWeather (previsão)."""

from api.connectors.openweather.client import PROVIDER, OpenWeatherClient

__all__ = ["PROVIDER", "OpenWeatherClient"]
