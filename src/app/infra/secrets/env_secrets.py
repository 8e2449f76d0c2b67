"""Environment Secrets: provedor de secrets via variáveis de ambiente.

Chaves PEM podem vir inline (com `\\n` escapado) ou por arquivo apontado
pela variável `<NOME>_FILE` (montagem de secret em volume).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvSecretProvider:
    """Provedor de secrets usando variáveis de ambiente.

    Args:
        prefix: Prefixo para variáveis de ambiente (default: "")
    """

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""

    def _env_key(self, key: str) -> str:
        """Converte nome de secret para variável de ambiente."""
        # private-key -> ALLINPAY_PRIVATE_KEY
        env_key = key.upper().replace("-", "_")
        return f"{self._prefix}{env_key}"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Obtém secret de variável de ambiente ou do arquivo `<VAR>_FILE`.

        Args:
            key: Nome do secret (ex.: private-key)
            default: Valor padrão

        Returns:
            Valor ou default
        """
        env_key = self._env_key(key)
        value = os.getenv(env_key)
        if value is not None:
            return value

        file_path = os.getenv(f"{env_key}_FILE")
        if file_path:
            return Path(file_path).read_text(encoding="utf-8")

        logger.debug("env_secret_not_found", extra={"key": key, "env_key": env_key})
        return default
