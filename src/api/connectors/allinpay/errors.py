"""Erros do protocolo AllinPay.

Todos são falhas fatais voltadas ao usuário (mensagem descritiva, status
400). Nenhum é re-tentado internamente; apenas `TaggedAllowableError` pode
ser absorvido por `AllinPayClient.call_allowing`.
"""

from __future__ import annotations

from app.infra.crypto.errors import GatewayCryptoError

MESSAGE_PREFIX = "Sistema de pagamento"


class AllinPayError(Exception):
    """Erro base do gateway AllinPay.

    Attributes:
        status_code: Status HTTP sugerido para a resposta ao usuário
        mark: Marcador do erro (errorCode do gateway, quando houver)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        mark: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.mark = mark


class GatewayStatusError(AllinPayError):
    """Gateway respondeu com status diferente de "OK"."""

    def __init__(
        self,
        gateway_message: str | None,
        error_code: str | None,
        status: str | None = None,
    ) -> None:
        super().__init__(
            f"{MESSAGE_PREFIX}: {gateway_message}",
            mark=error_code,
        )
        self.gateway_message = gateway_message
        self.error_code = error_code
        self.status = status


class TaggedAllowableError(GatewayStatusError):
    """GatewayStatusError cujo errorCode coincide com a tag `allow` declarada."""


class SignatureVerificationError(AllinPayError):
    """Assinatura da resposta/notificação não confere."""

    def __init__(self, message: str = f"{MESSAGE_PREFIX}: falha na verificação da assinatura do retorno") -> None:
        super().__init__(message)


class PayloadParseError(AllinPayError):
    """Payload assinado não é JSON válido."""

    def __init__(self, message: str = f"{MESSAGE_PREFIX}: falha ao interpretar o retorno") -> None:
        super().__init__(message)


class GatewayConfigError(AllinPayError):
    """Configuração ausente/inválida para a operação solicitada."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=500)


__all__ = [
    "AllinPayError",
    "GatewayConfigError",
    "GatewayCryptoError",
    "GatewayStatusError",
    "PayloadParseError",
    "SignatureVerificationError",
    "TaggedAllowableError",
]
