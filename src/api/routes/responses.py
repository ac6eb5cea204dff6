"""Envelope de resposta do relay (headers fixos em toda resposta)."""

from __future__ import annotations

from fastapi import Response, status

from config.settings import RESPONSE_HEADERS


def relay_response(body: str = "", status_code: int = status.HTTP_200_OK) -> Response:
    """Monta resposta com Content-Type JSON UTF-8 e CORS liberado."""
    return Response(content=body, status_code=status_code, headers=dict(RESPONSE_HEADERS))
