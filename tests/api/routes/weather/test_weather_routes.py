"""Testes dos endpoints do relay de clima."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.weather import router as weather
from app.services import WeatherRelay

EXPECTED_HEADERS = {
    "content-type": "application/json;charset=UTF-8",
    "access-control-allow-origin": "*",
}


def _build_request(relay: WeatherRelay, path: str = "/") -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=SimpleNamespace(weather_relay=relay)),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _relay() -> MagicMock:
    relay = MagicMock(spec=WeatherRelay)
    relay.current_weather = AsyncMock(return_value='{"current":1}')
    relay.historic_weather = AsyncMock(return_value='{"historic":1}')
    relay.station_data = AsyncMock(return_value="<p>x</p>")
    relay.forecast = AsyncMock(return_value='{"forecast":1}')
    return relay


def _assert_relay_headers(response: object) -> None:
    for name, value in EXPECTED_HEADERS.items():
        assert response.headers[name] == value  # type: ignore[attr-defined]


@pytest.mark.asyncio
async def test_current_weather_route() -> None:
    relay = _relay()

    response = await weather.current_weather(_build_request(relay))

    assert response.status_code == 200
    assert response.body == b'{"current":1}'
    _assert_relay_headers(response)
    relay.current_weather.assert_awaited_once()


@pytest.mark.asyncio
async def test_historic_route() -> None:
    relay = _relay()

    response = await weather.historic_weather(_build_request(relay, "/historic"))

    assert response.body == b'{"historic":1}'
    relay.historic_weather.assert_awaited_once()
    relay.current_weather.assert_not_awaited()


@pytest.mark.asyncio
async def test_station_data_route_keeps_json_content_type_for_html() -> None:
    relay = _relay()

    response = await weather.station_data(_build_request(relay, "/station-data"))

    assert response.body == b"<p>x</p>"
    _assert_relay_headers(response)
    relay.station_data.assert_awaited_once()
    relay.current_weather.assert_not_awaited()
    relay.historic_weather.assert_not_awaited()
    relay.forecast.assert_not_awaited()


@pytest.mark.asyncio
async def test_forecast_route() -> None:
    relay = _relay()

    response = await weather.forecast(_build_request(relay, "/forecast"))

    assert response.body == b'{"forecast":1}'
    relay.forecast.assert_awaited_once()


def test_router_registers_exact_get_paths() -> None:
    routes = {(route.path, tuple(sorted(route.methods))) for route in weather.router.routes}

    assert routes == {
        ("/", ("GET",)),
        ("/historic", ("GET",)),
        ("/station-data", ("GET",)),
        ("/forecast", ("GET",)),
    }
