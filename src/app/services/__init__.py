"""Serviços de aplicação."""

from app.services.weather_relay import WeatherRelay

__all__ = ["WeatherRelay"]
