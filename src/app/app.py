"""Entrypoint do serviço de gateway AllinPay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI) que recebe as
notificações assíncronas do gateway.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import create_allinpay_client, initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Monta o cliente AllinPay (chaves carregadas uma única vez)

    Shutdown:
    - Fecha o transporte HTTP
    """
    logger.info("app_starting", extra={"service": "allinpay-gateway"})
    app.state.allinpay_client = None

    if not validate_runtime_settings():
        try:
            app.state.allinpay_client = create_allinpay_client()
        except Exception as exc:
            logger.warning("allinpay_client_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": "allinpay-gateway"})
    client = getattr(app.state, "allinpay_client", None)
    if client is not None:
        await client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="AllinPay Gateway",
        description="Cliente assinado e receptor de notificações do gateway AllinPay",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "allinpay-gateway"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting AllinPay gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
