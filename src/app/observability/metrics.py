"""Registro de métricas do gateway via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de ida e volta de cada chamada service/method
- Erro de gateway: falhas de status, assinatura ou parse, por tipo
- Requisição lenta: chamadas acima do limiar configurado
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "allinpay")
        operation: Nome da operação (ex: "MemberService.createMember")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_slow_request(
    component: str,
    operation: str,
    latency_ms: float,
    threshold_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra chamada que excedeu o limiar de latência."""
    logger.warning(
        "metric_slow_request",
        extra={
            "metric_type": "slow_request",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "threshold_ms": threshold_ms,
            "correlation_id": correlation_id,
        },
    )


def record_gateway_error(
    component: str,
    operation: str,
    error_type: str,
    error_code: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra falha de validação de resposta do gateway.

    Args:
        component: Nome do componente (ex: "allinpay")
        operation: Nome da operação
        error_type: Classe do erro (ex: "SignatureVerificationError")
        error_code: errorCode retornado pelo gateway, quando houver
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_gateway_error",
        extra={
            "metric_type": "gateway_error",
            "component": component,
            "operation": operation,
            "error_type": error_type,
            "error_code": error_code,
            "correlation_id": correlation_id,
        },
    )
