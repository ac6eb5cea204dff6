"""Conjunto de parâmetros de uma chamada assinada à WeatherLink v2.

Criado do zero a cada requisição inbound; nunca compartilhado entre requisições.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from utils.errors import MissingParameterError

# Nomes de parâmetros usados pela WeatherLink v2
API_KEY = "api-key"
STATION_ID = "station-id"
TIMESTAMP = "t"
START_TIMESTAMP = "start-timestamp"
END_TIMESTAMP = "end-timestamp"


class ParameterSet(Mapping[str, str]):
    """Mapeamento nome → valor (strings), mutável durante o preparo da chamada."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        # Valores omitidos: api-key não deve aparecer em logs/tracebacks
        return f"ParameterSet(names={sorted(self._values)})"

    def set(self, name: str, value: str | int) -> None:
        """Atribui (ou reatribui) um parâmetro."""
        self._values[name] = str(value)

    def require(self, name: str) -> str:
        """Retorna o valor do parâmetro ou falha se ausente/vazio.

        Raises:
            MissingParameterError: Se o parâmetro não tem valor.
        """
        value = self._values.get(name)
        if not value:
            raise MissingParameterError(name)
        return value
