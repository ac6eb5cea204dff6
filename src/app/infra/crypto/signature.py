"""Assinatura HMAC-SHA256 de requisições à WeatherLink v2.

String canônica: nomes ordenados (ordem de code point, case-sensitive),
concatenados como ``nome + valor`` sem separadores.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from typing import TYPE_CHECKING

from app.infra.crypto.parameters import TIMESTAMP
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from app.infra.crypto.parameters import ParameterSet


def build_canonical_string(parameters: ParameterSet, names: Iterable[str]) -> str:
    """Monta a string canônica a partir dos parâmetros selecionados.

    Args:
        parameters: Valores atuais da chamada
        names: Nomes que participam da assinatura

    Raises:
        MissingParameterError: Se algum nome não tem valor.
    """
    return "".join(name + parameters.require(name) for name in sorted(names))


class WeatherLinkSigner:
    """Calcula ``api-signature`` para a WeatherLink v2.

    Args:
        api_secret: Secret da API v2
        clock: Fonte de tempo em segundos (injetável em testes)
    """

    def __init__(
        self,
        api_secret: str,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._api_secret = api_secret
        self._clock = clock

    def sign(self, parameters: ParameterSet, names: Iterable[str]) -> str:
        """Atualiza ``t`` com o instante atual e retorna a assinatura hex.

        ``t`` é reatribuído imediatamente antes do cálculo; o valor que
        vai na URL deve ser lido de ``parameters`` depois desta chamada.

        Returns:
            Digest HMAC-SHA256 em hex minúsculo (64 caracteres).

        Raises:
            ConfigurationError: Se o secret não está configurado.
            MissingParameterError: Se algum parâmetro exigido está ausente.
        """
        if not self._api_secret:
            raise ConfigurationError("WEATHERLINK_V2_API_SECRET não configurado")

        parameters.set(TIMESTAMP, int(self._clock()))
        canonical = build_canonical_string(parameters, names)
        return hmac.new(
            self._api_secret.encode("utf-8"),
            canonical.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
