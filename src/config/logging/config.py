"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (timestamp, level, logger, message, correlation_id, service)
- Mascaramento de campos sensíveis do protocolo (sign, chaves, req)
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="allinpay_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("allinpay_request", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "allinpay_gateway"

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {"asctime", "levelname", "name", "message", "correlation_id", "service"}
)

# Nomes de saída: timestamp/level/logger
FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com campos obrigatórios renomeados.

    Exemplo:
        {"timestamp": "2026-10-19T10:30:05+0800", "level": "WARNING",
         "logger": "api.connectors.allinpay.observer",
         "message": "allinpay_request_too_long", "correlation_id": "9f1c...",
         "service": "allinpay_gateway", "elapsed_ms": 2350}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS)),
        rename_fields=FIELD_RENAME_MAP,
        datefmt=TIMESTAMP_FORMAT,
    )


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    Os filters do handler injetam service/correlation_id e mascaram
    campos sensíveis.
    """
    return logging.getLogger(name)
