"""Connector WeatherLink (v1 legada e v2 assinada)."""

from api.connectors.weatherlink.client import (
    CURRENT_SIGNED_PARAMS,
    HISTORIC_SIGNED_PARAMS,
    PROVIDER_V1,
    PROVIDER_V2,
    WeatherLinkClient,
)
from api.connectors.weatherlink.window import HistoricWindow, compute_historic_window

__all__ = [
    "CURRENT_SIGNED_PARAMS",
    "HISTORIC_SIGNED_PARAMS",
    "PROVIDER_V1",
    "PROVIDER_V2",
    "HistoricWindow",
    "WeatherLinkClient",
    "compute_historic_window",
]
