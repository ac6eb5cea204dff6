"""Testes do bootstrap (validação de settings e wiring)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app.bootstrap import validate_runtime_settings
from app.bootstrap.dependencies import create_weather_relay
from app.services import WeatherRelay
from config.settings import (
    get_base_settings,
    get_openweather_settings,
    get_relay_settings,
    get_weatherlink_settings,
)

_CACHED_GETTERS = (
    get_base_settings,
    get_openweather_settings,
    get_relay_settings,
    get_weatherlink_settings,
)

_COMPLETE_ENV = {
    "WEATHERLINK_V1_USER": "u",
    "WEATHERLINK_V1_PASSWORD": "p",
    "WEATHERLINK_V1_API_TOKEN": "t",
    "WEATHERLINK_V2_API_KEY": "k",
    "WEATHERLINK_V2_API_SECRET": "s",
    "OPENWEATHER_API_KEY": "ow",
}


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _COMPLETE_ENV:
        monkeypatch.delenv(name, raising=False)


def test_production_with_missing_settings_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(RuntimeError, match="WEATHERLINK_V2_API_SECRET"):
        validate_runtime_settings()


def test_development_with_missing_settings_only_warns(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("ENVIRONMENT", "development")

    validate_runtime_settings()


def test_production_with_complete_settings_passes(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in _COMPLETE_ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("ENVIRONMENT", "production")

    validate_runtime_settings()


def test_create_weather_relay_without_network() -> None:
    assert isinstance(create_weather_relay(), WeatherRelay)
