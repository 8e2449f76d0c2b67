"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta o transporte httpx e o observer ao cliente AllinPay.

Uso:
    from app.bootstrap import initialize_app, create_allinpay_client

    initialize_app()
    client = create_allinpay_client()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_allinpay_settings, get_base_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name.replace("-", "_"),
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"allinpay: {error}" for error in get_allinpay_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


def create_allinpay_client():
    """Cria AllinPayClient com transporte httpx e observer de logging.

    Raises:
        GatewayCryptoError: Se alguma chave PEM configurada for inválida
    """
    from api.connectors.allinpay import (
        AllinPayClient,
        LoggingGatewayObserver,
        create_allinpay_http_client,
    )

    settings = get_allinpay_settings()
    return AllinPayClient(
        settings,
        transport=create_allinpay_http_client(settings),
        observer=LoggingGatewayObserver(),
    )
