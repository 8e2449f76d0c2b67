"""Secrets: integração com provedores de segredos.

Módulos disponíveis:
    - env_secrets: variáveis de ambiente ou arquivos montados (`*_FILE`)
"""

from __future__ import annotations

from app.infra.secrets.env_secrets import EnvSecretProvider

__all__ = [
    "EnvSecretProvider",
]
