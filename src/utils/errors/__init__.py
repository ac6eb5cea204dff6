"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    MissingParameterError,
    RelayError,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamPayloadError,
)

__all__ = [
    "ConfigurationError",
    "MissingParameterError",
    "RelayError",
    "UpstreamConnectionError",
    "UpstreamError",
    "UpstreamPayloadError",
]
