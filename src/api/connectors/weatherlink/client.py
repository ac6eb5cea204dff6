"""Cliente WeatherLink (v1 legada e v2 assinada).

Endpoints:
- v1 NoaaExt.json: credenciais fixas na query, sem assinatura
- v2 current/{station}: assinatura sobre api-key, station-id, t
- v2 historic/{station}: assinatura sobre os cinco parâmetros
  (api-key, station-id, t, start-timestamp, end-timestamp)

Cada método monta um ParameterSet novo; nada é compartilhado entre requisições.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, UpstreamRequest
from api.connectors.weatherlink.window import (
    compute_historic_window,
    local_now,
    resolve_timezone,
)
from app.infra.crypto import (
    API_KEY,
    END_TIMESTAMP,
    START_TIMESTAMP,
    STATION_ID,
    TIMESTAMP,
    ParameterSet,
    WeatherLinkSigner,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    import httpx

    from config.settings import WeatherLinkSettings

logger: logging.Logger = logging.getLogger(__name__)

PROVIDER_V1 = "weatherlink_v1"
PROVIDER_V2 = "weatherlink_v2"

CURRENT_SIGNED_PARAMS = frozenset({API_KEY, STATION_ID, TIMESTAMP})
HISTORIC_SIGNED_PARAMS = frozenset(
    {API_KEY, STATION_ID, TIMESTAMP, START_TIMESTAMP, END_TIMESTAMP}
)


class WeatherLinkClient:
    """Monta e executa as chamadas WeatherLink.

    Args:
        settings: Credenciais e endpoints
        http_client: Cliente HTTP base (um GET por chamada)
        signer: Signer v2; construído a partir do secret se None
        now: Fonte do instante "local" para a janela histórica
    """

    def __init__(
        self,
        settings: WeatherLinkSettings,
        http_client: HttpClient,
        signer: WeatherLinkSigner | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client
        self._signer = signer or WeatherLinkSigner(settings.v2_api_secret)
        self._now = now or self._local_now

    def _local_now(self) -> datetime:
        # Fuso resolvido a cada chamada; nome inválido levanta ConfigurationError
        return local_now(resolve_timezone(self._settings.timezone))

    def _new_parameters(self) -> ParameterSet:
        return ParameterSet(
            {
                API_KEY: self._settings.v2_api_key,
                STATION_ID: self._settings.station_id,
            }
        )

    def build_station_data_request(self) -> UpstreamRequest:
        """GET {v1}/NoaaExt.json?user=&pass=&apiToken="""
        return UpstreamRequest(
            provider=PROVIDER_V1,
            endpoint=self._settings.station_data_endpoint,
            query=(
                ("user", self._settings.v1_user),
                ("pass", self._settings.v1_password),
                ("apiToken", self._settings.v1_api_token),
            ),
        )

    def build_current_request(self) -> UpstreamRequest:
        """GET {v2}/current/{station}?api-key=&api-signature=&t="""
        parameters = self._new_parameters()
        signature = self._signer.sign(parameters, CURRENT_SIGNED_PARAMS)
        return UpstreamRequest(
            provider=PROVIDER_V2,
            endpoint=self._settings.current_endpoint,
            query=(
                (API_KEY, parameters[API_KEY]),
                ("api-signature", signature),
                (TIMESTAMP, parameters[TIMESTAMP]),
            ),
        )

    def build_historic_request(self) -> UpstreamRequest:
        """GET {v2}/historic/{station} com janela [meia-noite + offset, agora]."""
        parameters = self._new_parameters()
        window = compute_historic_window(
            self._now(), self._settings.historic_start_offset_hours
        )
        parameters.set(END_TIMESTAMP, window.end_timestamp)
        parameters.set(START_TIMESTAMP, window.start_timestamp)
        signature = self._signer.sign(parameters, HISTORIC_SIGNED_PARAMS)

        logger.debug(
            "weatherlink_historic_window",
            extra={
                "start_timestamp": window.start_timestamp,
                "end_timestamp": window.end_timestamp,
            },
        )
        return UpstreamRequest(
            provider=PROVIDER_V2,
            endpoint=self._settings.historic_endpoint,
            query=(
                (API_KEY, parameters[API_KEY]),
                ("api-signature", signature),
                (TIMESTAMP, parameters[TIMESTAMP]),
                (START_TIMESTAMP, parameters[START_TIMESTAMP]),
                (END_TIMESTAMP, parameters[END_TIMESTAMP]),
            ),
        )

    async def fetch_station_data(self) -> httpx.Response:
        return await self._http_client.get(self.build_station_data_request())

    async def fetch_current(self) -> httpx.Response:
        return await self._http_client.get(self.build_current_request())

    async def fetch_historic(self) -> httpx.Response:
        return await self._http_client.get(self.build_historic_request())
