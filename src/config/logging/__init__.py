"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="allinpay_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("allinpay_request", extra={"latency_ms": 42})

Nunca logar chaves, assinaturas ou payloads brutos do gateway:
SensitiveFieldFilter mascara esses campos quando passados via `extra`.
"""

from config.logging.config import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.filters import MASK, SENSITIVE_FIELDS, CorrelationIdFilter, SensitiveFieldFilter

__all__ = [
    "FIELD_RENAME_MAP",
    "MASK",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
