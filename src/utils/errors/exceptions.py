"""Exceções de domínio do relay."""

from __future__ import annotations


class RelayError(RuntimeError):
    """Base para falhas do relay."""


class ConfigurationError(RelayError):
    """Configuração ausente ou inválida detectada durante a requisição."""


class MissingParameterError(ConfigurationError):
    """Parâmetro exigido pela assinatura sem valor no ParameterSet."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing_parameter: {name}")
        self.name = name


class UpstreamError(RelayError):
    """Falha ao obter resposta utilizável de um provedor upstream.

    Nunca carrega URL completa nem credenciais.
    """

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class UpstreamConnectionError(UpstreamError):
    """Falha de transporte (DNS, conexão recusada, timeout)."""


class UpstreamPayloadError(UpstreamError):
    """Corpo declarado como JSON que não pôde ser decodificado."""
