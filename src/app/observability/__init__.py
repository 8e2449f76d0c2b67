"""Observabilidade: correlation_id e métricas do gateway.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_gateway_error
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_gateway_error,
    record_latency,
    record_slow_request,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "record_gateway_error",
    "record_latency",
    "record_slow_request",
    "reset_correlation_id",
    "set_correlation_id",
]
