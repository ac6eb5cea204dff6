"""Assinatura de requisições para provedores autenticados por HMAC.

Localizado em app/infra/ por ser implementação concreta de criptografia;
connectors em api/ recebem o signer já construído pelo bootstrap.
"""

from .parameters import (
    API_KEY,
    END_TIMESTAMP,
    START_TIMESTAMP,
    STATION_ID,
    TIMESTAMP,
    ParameterSet,
)
from .signature import WeatherLinkSigner, build_canonical_string

__all__ = [
    "API_KEY",
    "END_TIMESTAMP",
    "START_TIMESTAMP",
    "STATION_ID",
    "TIMESTAMP",
    "ParameterSet",
    "WeatherLinkSigner",
    "build_canonical_string",
]
