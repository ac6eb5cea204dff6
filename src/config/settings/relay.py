"""Settings do relay HTTP (chamadas upstream e envelope de resposta)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Headers fixos em toda resposta do relay, inclusive quando o corpo não é JSON
RESPONSE_HEADERS: dict[str, str] = {
    "Content-Type": "application/json;charset=UTF-8",
    "Access-Control-Allow-Origin": "*",
}


@dataclass(frozen=True)
class RelaySettings:
    """Configurações das chamadas upstream.

    Attributes:
        upstream_timeout_seconds: Timeout por chamada upstream (0 = sem timeout)
        verify_ssl: Verifica certificados TLS dos provedores
    """

    upstream_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.upstream_timeout_seconds < 0:
            errors.append("RELAY_UPSTREAM_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings a partir de variáveis de ambiente."""
    return RelaySettings(
        upstream_timeout_seconds=float(os.getenv("RELAY_UPSTREAM_TIMEOUT_SECONDS", "30")),
        verify_ssl=os.getenv("RELAY_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
