"""Janela de tempo da consulta histórica.

Início: meia-noite local mais recente + offset (padrão 6 h), somado em
segundos absolutos. Fim: instante atual. Antes do horário do offset o
início fica depois do fim; a WeatherLink responde com erro e o corpo é
repassado como qualquer outra resposta.

O offset UTC da meia-noite é o vigente à meia-noite, não o de agora:
em dias de mudança de horário de verão os dois diferem em uma hora.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from utils.errors import ConfigurationError

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class HistoricWindow:
    start_timestamp: int
    end_timestamp: int


def resolve_timezone(name: str) -> tzinfo | None:
    """Converte nome IANA em tzinfo; vazio significa horário local do host.

    Raises:
        ConfigurationError: Nome de fuso desconhecido ou malformado.
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"WEATHERLINK_TIMEZONE inválido: {name}") from exc


def local_now(tz: tzinfo | None = None) -> datetime:
    """Instante atual no fuso informado.

    Sem fuso, retorna datetime naive no horário local do host; ``timestamp()``
    de um naive usa as regras de horário de verão do host para cada instante.
    """
    if tz is None:
        return datetime.now()
    return datetime.now(tz)


def compute_historic_window(now: datetime, start_offset_hours: int = 6) -> HistoricWindow:
    """Calcula a janela [meia-noite + offset, agora] em Unix seconds.

    Args:
        now: Instante de referência: naive (horário local do host) ou com
            tzinfo de fuso real (ZoneInfo); o offset da meia-noite é
            resolvido pelas regras do fuso naquele instante
        start_offset_hours: Horas após a meia-noite para o início
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    start = int(midnight.timestamp()) + start_offset_hours * SECONDS_PER_HOUR
    return HistoricWindow(start_timestamp=start, end_timestamp=int(now.timestamp()))
