"""Settings específicas do gateway AllinPay.

Configurações do gateway SOA (endpoint, sysid e chaves RSA).
As chaves são lidas via EnvSecretProvider (inline ou `*_FILE`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from app.infra.secrets import EnvSecretProvider

# Constantes do protocolo
PROTOCOL_VERSION: str = "2.0"
SOA_PATH: str = "/service/soa"
DEFAULT_TIMEZONE: str = "Asia/Shanghai"
TOO_LONG_THRESHOLD_MS: int = 2 * 1000


@dataclass(frozen=True)
class AllinPaySettings:
    """Configurações do gateway AllinPay.

    Attributes:
        endpoint: URL base do gateway (sem barra final)
        sys_id: Identificador do sistema junto ao gateway
        private_key_pem: Chave privada local (assina requests, decifra campos)
        allinpay_public_key_pem: Chave pública da AllinPay (verifica, cifra campos)
        bank_private_key_pem: Chave privada do banco (atestado de transferência)
        timezone: Fuso do timestamp esperado pelo gateway
        request_timeout_seconds: Timeout das requisições HTTP
        too_long_threshold_ms: Limiar para o evento de requisição lenta
    """

    endpoint: str = ""
    sys_id: str = ""
    private_key_pem: str = field(default="", repr=False)
    allinpay_public_key_pem: str = field(default="", repr=False)
    bank_private_key_pem: str = field(default="", repr=False)

    timezone: str = DEFAULT_TIMEZONE
    request_timeout_seconds: float = 30.0
    too_long_threshold_ms: int = TOO_LONG_THRESHOLD_MS

    @property
    def soa_url(self) -> str:
        """URL completa do endpoint service/soa."""
        return f"{self.endpoint.rstrip('/')}{SOA_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do gateway.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.endpoint:
            errors.append("ALLINPAY_ENDPOINT não configurado")
        elif not self.endpoint.startswith(("http://", "https://")):
            errors.append("ALLINPAY_ENDPOINT deve começar com http:// ou https://")

        if not self.sys_id:
            errors.append("ALLINPAY_SYS_ID não configurado")

        if not self.private_key_pem:
            errors.append("ALLINPAY_PRIVATE_KEY não configurado")

        if not self.allinpay_public_key_pem:
            errors.append("ALLINPAY_PUBLIC_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("ALLINPAY_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.too_long_threshold_ms <= 0:
            errors.append("ALLINPAY_TOO_LONG_THRESHOLD_MS deve ser > 0")

        return errors


def _load_from_env() -> AllinPaySettings:
    """Carrega AllinPaySettings a partir de variáveis de ambiente."""
    secrets = EnvSecretProvider(prefix="ALLINPAY")
    return AllinPaySettings(
        endpoint=os.getenv("ALLINPAY_ENDPOINT", ""),
        sys_id=os.getenv("ALLINPAY_SYS_ID", ""),
        private_key_pem=secrets.get("private-key", "") or "",
        allinpay_public_key_pem=secrets.get("public-key", "") or "",
        bank_private_key_pem=secrets.get("bank-private-key", "") or "",
        timezone=os.getenv("ALLINPAY_TIMEZONE", DEFAULT_TIMEZONE),
        request_timeout_seconds=float(
            os.getenv("ALLINPAY_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        too_long_threshold_ms=int(
            os.getenv("ALLINPAY_TOO_LONG_THRESHOLD_MS", str(TOO_LONG_THRESHOLD_MS))
        ),
    )


@lru_cache(maxsize=1)
def get_allinpay_settings() -> AllinPaySettings:
    """Retorna instância cacheada de AllinPaySettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
