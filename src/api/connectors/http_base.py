"""Cliente HTTP base para conectores da camada API.

Uma requisição inbound gera exatamente um GET upstream: sem retry,
sem headers customizados. Status não-2xx não é erro aqui; o corpo
segue para o normalizador como se fosse sucesso.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from utils.errors import UpstreamConnectionError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamRequest:
    """Descritor de uma chamada upstream (sempre GET).

    Attributes:
        provider: Nome do provedor (para logs e erros)
        endpoint: URL sem query string
        query: Pares (nome, valor) na ordem em que devem aparecer na URL
        headers: Headers da chamada (vazio por padrão)
    """

    provider: str
    endpoint: str
    query: Sequence[tuple[str, str]] = ()
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> httpx.URL:
        """URL final com query codificada, preservando a ordem dos pares."""
        return httpx.URL(self.endpoint, params=list(self.query))

    @property
    def path(self) -> str:
        """Path sem query (seguro para logs)."""
        return self.url.path


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float | None = 30.0
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def get(self, request: UpstreamRequest) -> httpx.Response:
        """Executa o GET descrito e retorna a resposta com corpo já lido.

        Raises:
            UpstreamConnectionError: Falha de transporte (DNS, conexão, timeout).
        """
        started_at = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    request.url,
                    headers=request.headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TransportError as exc:
            logger.warning(
                "upstream_connection_error",
                extra={
                    "provider": request.provider,
                    "path": request.path,
                    "error_type": type(exc).__name__,
                },
            )
            raise UpstreamConnectionError(
                "http_connection_error", provider=request.provider
            ) from exc

        latency_ms = (time.perf_counter() - started_at) * 1000
        logger.info(
            "upstream_response",
            extra={
                "provider": request.provider,
                "path": request.path,
                "status_code": response.status_code,
                "latency_ms": round(latency_ms, 2),
            },
        )
        return response


def create_http_client(timeout_seconds: float, verify_ssl: bool = True) -> HttpClient:
    """Factory do cliente base; ``timeout_seconds == 0`` desativa o timeout."""
    return HttpClient(
        HttpClientConfig(
            timeout_seconds=timeout_seconds or None,
            verify_ssl=verify_ssl,
        )
    )
