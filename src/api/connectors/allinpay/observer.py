"""Observers padrão do cliente AllinPay."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .envelope import FIELD_SYSID, FIELD_TIMESTAMP

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.gateway import RequestTiming

logger = logging.getLogger(__name__)


def _operation(params: Mapping[str, str]) -> dict[str, str]:
    # identifica a chamada sem abrir o `req` nos logs
    return {
        "sysid": params.get(FIELD_SYSID, ""),
        "request_timestamp": params.get(FIELD_TIMESTAMP, ""),
    }


class NoopGatewayObserver:
    """Observer padrão: todos os hooks são no-op.

    Sobrescreva apenas os hooks de interesse.
    """

    def on_request(self, params: Mapping[str, str], response: Any) -> None:
        return None

    def on_request_error(
        self,
        params: Mapping[str, str],
        response: Any,
        error: Exception,
    ) -> None:
        return None

    def on_request_too_long(
        self,
        params: Mapping[str, str],
        response: Any,
        timing: RequestTiming,
    ) -> None:
        return None

    def on_back_receive(self, body: Mapping[str, Any]) -> None:
        return None


class LoggingGatewayObserver(NoopGatewayObserver):
    """Observer que registra os hooks como logs estruturados (sem PII)."""

    def on_request(self, params: Mapping[str, str], response: Any) -> None:
        status = response.get("status") if isinstance(response, dict) else None
        logger.info("allinpay_request", extra={**_operation(params), "status": status})

    def on_request_error(
        self,
        params: Mapping[str, str],
        response: Any,
        error: Exception,
    ) -> None:
        logger.warning(
            "allinpay_request_error",
            extra={
                **_operation(params),
                "error_type": type(error).__name__,
                "error_code": getattr(error, "mark", None),
            },
        )

    def on_request_too_long(
        self,
        params: Mapping[str, str],
        response: Any,
        timing: RequestTiming,
    ) -> None:
        logger.warning(
            "allinpay_request_too_long",
            extra={**_operation(params), "elapsed_ms": timing.elapsed_ms},
        )

    def on_back_receive(self, body: Mapping[str, Any]) -> None:
        logger.info("allinpay_back_receive", extra={"fields": sorted(body)})
