"""Settings específicas da WeatherLink.

Duas gerações de API convivem:
- v1 (legada): credenciais fixas (user, pass, apiToken) na query string.
- v2: api-key + assinatura HMAC-SHA256 calculada com o api secret.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Constantes da WeatherLink
WEATHERLINK_V1_BASE_URL: str = "https://api.weatherlink.com/v1"
WEATHERLINK_V2_BASE_URL: str = "https://api.weatherlink.com/v2"
DEFAULT_STATION_ID: str = "33062"
DEFAULT_HISTORIC_START_OFFSET_HOURS: int = 6


@dataclass(frozen=True)
class WeatherLinkSettings:
    """Configurações dos endpoints WeatherLink.

    Attributes:
        v1_user: Usuário da API v1 (legada)
        v1_password: Senha da API v1
        v1_api_token: Token da API v1
        v2_api_key: API key da v2 (vai na query e na assinatura)
        v2_api_secret: Secret da v2 para HMAC-SHA256 (nunca sai do processo)
        station_id: Identificador da estação
        v1_base_url: URL base da API v1
        v2_base_url: URL base da API v2
        timezone: Fuso IANA usado para a meia-noite do histórico
            (vazio = horário local do host)
        historic_start_offset_hours: Horas somadas à meia-noite local
            para o início da janela histórica
    """

    # Credenciais v1
    v1_user: str = ""
    v1_password: str = ""
    v1_api_token: str = ""

    # Credenciais v2
    v2_api_key: str = ""
    v2_api_secret: str = ""

    station_id: str = DEFAULT_STATION_ID

    # API
    v1_base_url: str = WEATHERLINK_V1_BASE_URL
    v2_base_url: str = WEATHERLINK_V2_BASE_URL

    # Janela histórica
    timezone: str = ""
    historic_start_offset_hours: int = DEFAULT_HISTORIC_START_OFFSET_HOURS

    @property
    def current_endpoint(self) -> str:
        """URL do endpoint de condições atuais (v2)."""
        return f"{self.v2_base_url}/current/{self.station_id}"

    @property
    def historic_endpoint(self) -> str:
        """URL do endpoint histórico (v2)."""
        return f"{self.v2_base_url}/historic/{self.station_id}"

    @property
    def station_data_endpoint(self) -> str:
        """URL do endpoint NOAA estendido (v1)."""
        return f"{self.v1_base_url}/NoaaExt.json"

    def validate(self) -> list[str]:
        """Valida configurações mínimas da WeatherLink.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.v2_api_key:
            errors.append("WEATHERLINK_V2_API_KEY não configurado")

        if not self.v2_api_secret:
            errors.append("WEATHERLINK_V2_API_SECRET não configurado")

        if not self.station_id:
            errors.append("WEATHERLINK_STATION_ID não configurado")

        if not (self.v1_user and self.v1_password and self.v1_api_token):
            errors.append(
                "WEATHERLINK_V1_USER/WEATHERLINK_V1_PASSWORD/"
                "WEATHERLINK_V1_API_TOKEN não configurados"
            )

        if not 0 <= self.historic_start_offset_hours < 24:
            errors.append("WEATHERLINK_HISTORIC_START_OFFSET_HOURS deve estar entre 0 e 23")

        if self.timezone and not _is_known_timezone(self.timezone):
            errors.append(f"WEATHERLINK_TIMEZONE inválido: {self.timezone}")

        return errors


def _is_known_timezone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def _load_from_env() -> WeatherLinkSettings:
    """Carrega WeatherLinkSettings a partir de variáveis de ambiente."""
    return WeatherLinkSettings(
        v1_user=os.getenv("WEATHERLINK_V1_USER", ""),
        v1_password=os.getenv("WEATHERLINK_V1_PASSWORD", ""),
        v1_api_token=os.getenv("WEATHERLINK_V1_API_TOKEN", ""),
        v2_api_key=os.getenv("WEATHERLINK_V2_API_KEY", ""),
        v2_api_secret=os.getenv("WEATHERLINK_V2_API_SECRET", ""),
        station_id=os.getenv("WEATHERLINK_STATION_ID", DEFAULT_STATION_ID),
        v1_base_url=os.getenv("WEATHERLINK_V1_BASE_URL", WEATHERLINK_V1_BASE_URL),
        v2_base_url=os.getenv("WEATHERLINK_V2_BASE_URL", WEATHERLINK_V2_BASE_URL),
        timezone=os.getenv("WEATHERLINK_TIMEZONE", ""),
        historic_start_offset_hours=int(
            os.getenv(
                "WEATHERLINK_HISTORIC_START_OFFSET_HOURS",
                str(DEFAULT_HISTORIC_START_OFFSET_HOURS),
            )
        ),
    )


@lru_cache(maxsize=1)
def get_weatherlink_settings() -> WeatherLinkSettings:
    """Retorna instância cacheada de WeatherLinkSettings."""
    return _load_from_env()
