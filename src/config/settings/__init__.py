"""Agregador de settings do weatherlink-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por provedor para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider settings
from config.settings.openweather import (
    OPENWEATHER_BASE_URL,
    OpenWeatherSettings,
    get_openweather_settings,
)

# Relay settings
from config.settings.relay import (
    RESPONSE_HEADERS,
    RelaySettings,
    get_relay_settings,
)
from config.settings.weatherlink import (
    WEATHERLINK_V1_BASE_URL,
    WEATHERLINK_V2_BASE_URL,
    WeatherLinkSettings,
    get_weatherlink_settings,
)

__all__ = [
    # Constants
    "OPENWEATHER_BASE_URL",
    "RESPONSE_HEADERS",
    "WEATHERLINK_V1_BASE_URL",
    "WEATHERLINK_V2_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Providers
    "OpenWeatherSettings",
    # Relay
    "RelaySettings",
    "WeatherLinkSettings",
    "get_base_settings",
    "get_openweather_settings",
    "get_relay_settings",
    "get_weatherlink_settings",
]
