"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (notificações do gateway, health)
- Leitura inicial do request (headers, corpo bruto)
- Delegação para o conector AllinPay
- Respostas HTTP apropriadas

Estrutura:
- routes/allinpay/: notificações assíncronas do gateway
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
