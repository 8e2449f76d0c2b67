"""Cliente HTTP base (httpx) para o conector AllinPay.

Uma única tentativa por chamada: o envelope carrega timestamp e assinatura
próprios, e reenviar o mesmo envelope reaproveitaria um timestamp já usado.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Aceita um `httpx.AsyncClient` compartilhado; sem ele, abre um cliente
    efêmero por requisição.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def get(
        self,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            if self._client is not None:
                response = await self._client.get(
                    url,
                    params=params,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
            else:
                async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                    response = await client.get(
                        url,
                        params=params,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                    )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"url": url})
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"url": url})
            raise HttpError("http_connection_error") from exc

        if response.status_code >= 500:
            raise HttpError("http_server_error", status_code=response.status_code)
        return response

    async def aclose(self) -> None:
        """Fecha o cliente compartilhado, se houver."""
        if self._client is not None:
            await self._client.aclose()
