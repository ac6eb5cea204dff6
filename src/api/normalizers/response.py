"""Normalização de respostas upstream em corpo string.

Classificação pelo header content-type:
- contém application/json → JSON: decodifica e re-serializa compacto
- qualquer outro valor (text/html, application/text, ausente) → TEXT: texto bruto

O status HTTP não é inspecionado: 4xx/5xx upstream seguem como corpo normal.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import TYPE_CHECKING

from utils.errors import UpstreamPayloadError

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class ResponseKind(str, Enum):
    """Tipo de corpo upstream."""

    JSON = "json"
    TEXT = "text"


def classify(content_type: str | None) -> ResponseKind:
    """Classifica o corpo pelo content-type (ausente = TEXT)."""
    if JSON_MEDIA_TYPE in (content_type or "").lower():
        return ResponseKind.JSON
    return ResponseKind.TEXT


def normalize(response: httpx.Response, provider: str | None = None) -> str:
    """Converte a resposta upstream no corpo devolvido ao chamador.

    Args:
        response: Resposta upstream com corpo já lido
        provider: Nome do provedor, anexado ao erro de payload

    Raises:
        UpstreamPayloadError: Corpo declarado JSON que não decodifica.
    """
    kind = classify(response.headers.get("content-type"))
    if kind is ResponseKind.JSON:
        return _compact_json(response, provider)
    return response.text


def _reject_constant(token: str) -> float:
    # NaN, Infinity e -Infinity não são JSON válido
    raise ValueError(f"invalid JSON constant: {token}")


def _compact_json(response: httpx.Response, provider: str | None) -> str:
    try:
        payload = json.loads(response.text, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.warning(
            "upstream_invalid_json",
            extra={"provider": provider, "status_code": response.status_code},
        )
        raise UpstreamPayloadError("upstream_invalid_json", provider=provider) from exc
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
