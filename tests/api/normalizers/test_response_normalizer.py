"""Testes do normalizador de respostas upstream."""

from __future__ import annotations

import httpx
import pytest

from api.normalizers import ResponseKind, classify, normalize
from utils.errors import UpstreamPayloadError


def _response(
    body: bytes,
    content_type: str | None = None,
    status_code: int = 200,
) -> httpx.Response:
    headers = {"content-type": content_type} if content_type is not None else {}
    return httpx.Response(status_code, headers=headers, content=body)


class TestClassify:
    """Testes para classify."""

    @pytest.mark.parametrize(
        ("content_type", "expected"),
        [
            ("application/json", ResponseKind.JSON),
            ("application/json; charset=utf-8", ResponseKind.JSON),
            ("Application/JSON", ResponseKind.JSON),
            ("text/html", ResponseKind.TEXT),
            ("application/text", ResponseKind.TEXT),
            ("", ResponseKind.TEXT),
            (None, ResponseKind.TEXT),
        ],
    )
    def test_classify(self, content_type: str | None, expected: ResponseKind) -> None:
        assert classify(content_type) is expected


class TestNormalize:
    """Testes para normalize."""

    def test_json_is_compacted(self) -> None:
        response = _response(b'{ "a" : 1 }', "application/json")
        assert normalize(response) == '{"a":1}'

    def test_json_key_order_preserved(self) -> None:
        response = _response(b'{"z": 1, "a": [1, 2], "m": {"k": null}}', "application/json")
        assert normalize(response) == '{"z":1,"a":[1,2],"m":{"k":null}}'

    def test_json_non_ascii_preserved(self) -> None:
        response = _response('{"city": "São Paulo"}'.encode(), "application/json; charset=utf-8")
        assert normalize(response) == '{"city":"São Paulo"}'

    def test_html_passthrough(self) -> None:
        assert normalize(_response(b"<p>x</p>", "text/html")) == "<p>x</p>"

    def test_application_text_passthrough(self) -> None:
        assert normalize(_response(b"  raw  text\n", "application/text")) == "  raw  text\n"

    def test_missing_content_type_passthrough(self) -> None:
        assert normalize(_response(b'{ "a" : 1 }')) == '{ "a" : 1 }'

    def test_error_status_is_normalized_like_success(self) -> None:
        response = _response(b'{"code": 401, "message": "bad signature"}', "application/json", 401)
        assert normalize(response) == '{"code":401,"message":"bad signature"}'

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(UpstreamPayloadError):
            normalize(_response(b"<html>oops</html>", "application/json"))

    def test_invalid_json_error_carries_provider(self) -> None:
        with pytest.raises(UpstreamPayloadError) as exc_info:
            normalize(_response(b"<html>oops</html>", "application/json"), "openweather")
        assert exc_info.value.provider == "openweather"

    @pytest.mark.parametrize("constant", [b"NaN", b"Infinity", b"-Infinity"])
    def test_non_finite_numbers_rejected(self, constant: bytes) -> None:
        body = b'{"t":45.0,"p":1E2,"x":' + constant + b"}"
        with pytest.raises(UpstreamPayloadError):
            normalize(_response(body, "application/json"))

    def test_float_formatting_follows_python_json(self) -> None:
        """Números reais mantêm a forma do float Python (1E2 vira 100.0)."""
        response = _response(b'{"t":45.0,"p":1E2,"n":7}', "application/json")
        assert normalize(response) == '{"t":45.0,"p":100.0,"n":7}'
