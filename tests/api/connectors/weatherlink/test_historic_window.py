"""Testes da janela de tempo histórica."""

from __future__ import annotations

import time
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from api.connectors.weatherlink.window import (
    compute_historic_window,
    local_now,
    resolve_timezone,
)
from utils.errors import ConfigurationError

CENTRAL_STANDARD = timezone(timedelta(hours=-6))


def test_window_starts_six_hours_after_local_midnight() -> None:
    now = datetime(2024, 1, 15, 10, 0, 0, tzinfo=CENTRAL_STANDARD)

    window = compute_historic_window(now)

    assert window.start_timestamp == int(
        datetime(2024, 1, 15, 6, 0, 0, tzinfo=CENTRAL_STANDARD).timestamp()
    )
    assert window.end_timestamp == int(now.timestamp())


def test_window_in_utc() -> None:
    now = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)

    window = compute_historic_window(now)

    assert window.start_timestamp == 1705298400  # 2024-01-15T06:00:00Z
    assert window.end_timestamp == 1705312800  # 2024-01-15T10:00:00Z


def test_window_truncates_seconds_of_now() -> None:
    now = datetime(2024, 1, 15, 10, 0, 59, 999999, tzinfo=timezone.utc)

    window = compute_historic_window(now)

    assert window.end_timestamp == 1705312859


def test_custom_offset() -> None:
    now = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)

    window = compute_historic_window(now, start_offset_hours=0)

    assert window.start_timestamp == 1705276800  # meia-noite UTC


def test_before_offset_start_is_after_end() -> None:
    """Antes das 06:00 locais a janela fica invertida (repassada como está)."""
    now = datetime(2024, 1, 15, 3, 0, 0, tzinfo=timezone.utc)

    window = compute_historic_window(now)

    assert window.start_timestamp > window.end_timestamp


def test_resolve_timezone_empty_means_host_local() -> None:
    assert resolve_timezone("") is None


def test_local_now_without_zone_is_host_local_naive() -> None:
    assert local_now().tzinfo is None


def test_local_now_with_zone_is_aware() -> None:
    assert local_now(CENTRAL_STANDARD).utcoffset() == timedelta(hours=-6)


def test_resolve_timezone_invalid_name_raises() -> None:
    with pytest.raises(ConfigurationError, match="Not/AZone"):
        resolve_timezone("Not/AZone")


@pytest.fixture
def host_tz_chicago(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fuso do host em America/Chicago durante o teste."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset indisponível")
    monkeypatch.setenv("TZ", "America/Chicago")
    time.tzset()
    try:
        if "CST" not in time.tzname:
            pytest.skip("tzdata do sistema sem America/Chicago")
        yield
    finally:
        monkeypatch.undo()
        time.tzset()


def test_dst_day_uses_offset_in_effect_at_host_midnight(host_tz_chicago: None) -> None:
    # 2024-03-10: meia-noite em CST (-06), 10:00 já em CDT (-05)
    now = datetime(2024, 3, 10, 10, 0, 0)

    window = compute_historic_window(now)

    assert window.start_timestamp == 1710072000  # 2024-03-10T12:00:00Z
    assert window.end_timestamp == 1710082800  # 2024-03-10T15:00:00Z


def test_dst_day_with_named_zone() -> None:
    try:
        chicago = ZoneInfo("America/Chicago")
    except ZoneInfoNotFoundError:
        pytest.skip("tzdata sem America/Chicago")
    now = datetime(2024, 3, 10, 10, 0, 0, tzinfo=chicago)

    window = compute_historic_window(now)

    assert window.start_timestamp == 1710072000
    assert window.end_timestamp == 1710082800
