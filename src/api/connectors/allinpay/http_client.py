"""Transporte HTTP do gateway AllinPay.

Implementa GatewayTransportProtocol: GET com os params do envelope,
retorna o corpo JSON decodificado. Não interpreta status de negócio nem
assinatura (responsabilidade do response_validator).
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from .http_base import HttpClient, HttpClientConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import AllinPaySettings

logger: logging.Logger = logging.getLogger(__name__)

USER_AGENT = "allinpay-gateway/1.0"


class AllinPayHttpClient(HttpClient):
    """Cliente HTTP especializado para o gateway AllinPay."""

    async def get_json(self, url: str, params: Mapping[str, str]) -> Any:
        """Executa GET e retorna o corpo JSON.

        Corpo não-JSON (ex.: página de erro de proxy) volta como texto bruto;
        quem rejeita é o response_validator, depois dos hooks de request.

        Raises:
            HttpError: Falha de conexão ou 5xx
        """
        response = await self.get(url, params=params, headers={"Accept": "application/json"})
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(
                "allinpay_response_not_json",
                extra={"url": url, "status_code": response.status_code},
            )
            return response.text

        logger.debug(
            "allinpay_http_ok",
            extra={"url": url, "status_code": response.status_code},
        )
        return data


def create_allinpay_http_client(
    settings: AllinPaySettings | None = None,
) -> AllinPayHttpClient:
    """Factory para criar o transporte com config padrão.

    Args:
        settings: AllinPaySettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_allinpay_settings

    allinpay = settings or get_allinpay_settings()
    config = HttpClientConfig(
        timeout_seconds=allinpay.request_timeout_seconds,
        default_headers={"User-Agent": USER_AGENT},
    )
    return AllinPayHttpClient(config=config)
