"""Validação das respostas do gateway AllinPay.

Dois formatos coexistem e usam entradas de assinatura diferentes:

1. Resultado de chamada (service/soa): assinatura sobre `signedValue`.
2. Notificação assíncrona: assinatura sobre `sysid + rps + timestamp`.

Payload só é interpretado depois da assinatura conferir.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.infra.crypto import verify_payload

from .envelope import (
    FIELD_ERROR_CODE,
    FIELD_MESSAGE,
    FIELD_RPS,
    FIELD_SIGN,
    FIELD_SIGNED_VALUE,
    FIELD_STATUS,
    FIELD_SYSID,
    FIELD_TIMESTAMP,
    STATUS_OK,
)
from .errors import (
    GatewayStatusError,
    PayloadParseError,
    SignatureVerificationError,
    TaggedAllowableError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cryptography.hazmat.primitives.asymmetric import rsa

logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "retorno inválido do gateway"


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _parse_payload(raw: str, shape: str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.warning("allinpay_payload_parse_failed", extra={"shape": shape})
        raise PayloadParseError() from exc


def validate_gateway_result(
    data: Mapping[str, Any] | None,
    public_key: rsa.RSAPublicKey,
    allow: str | None = None,
) -> Any:
    """Valida resultado de service/soa e retorna o payload de `signedValue`.

    Args:
        data: Corpo da resposta (texto bruto ou None viram GatewayStatusError)
        public_key: Chave pública da AllinPay
        allow: errorCode que deve virar TaggedAllowableError

    Raises:
        GatewayStatusError: status != "OK" (antes de qualquer verificação)
        TaggedAllowableError: status != "OK" com errorCode == allow
        SignatureVerificationError: assinatura de `signedValue` não confere
        PayloadParseError: `signedValue` não é JSON
    """
    if not isinstance(data, dict):
        logger.warning(
            "allinpay_response_not_object",
            extra={"shape": "gateway_result", "body_type": type(data).__name__},
        )
        raise GatewayStatusError(INVALID_RESPONSE_MESSAGE, None)

    status = data.get(FIELD_STATUS)
    if status != STATUS_OK:
        error_code = data.get(FIELD_ERROR_CODE)
        error_cls = (
            TaggedAllowableError
            if allow is not None and error_code == allow
            else GatewayStatusError
        )
        raise error_cls(data.get(FIELD_MESSAGE), error_code, status=status)

    signed_value = data.get(FIELD_SIGNED_VALUE)
    if not verify_payload(signed_value, data.get(FIELD_SIGN), public_key):
        logger.warning("allinpay_signature_invalid", extra={"shape": "gateway_result"})
        raise SignatureVerificationError()

    return _parse_payload(signed_value, "gateway_result")


def validate_callback_result(
    data: Mapping[str, Any],
    public_key: rsa.RSAPublicKey,
) -> Any:
    """Valida notificação assíncrona e retorna o payload de `rps`.

    Raises:
        SignatureVerificationError: assinatura de `sysid + rps + timestamp` não confere
        PayloadParseError: `rps` não é JSON
    """
    rps = _as_text(data.get(FIELD_RPS))
    signing_input = f"{_as_text(data.get(FIELD_SYSID))}{rps}{_as_text(data.get(FIELD_TIMESTAMP))}"
    if not verify_payload(signing_input, data.get(FIELD_SIGN), public_key):
        logger.warning("allinpay_signature_invalid", extra={"shape": "callback"})
        raise SignatureVerificationError()

    return _parse_payload(rps, "callback")
