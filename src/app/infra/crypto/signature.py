"""Assinatura RSA-SHA1 sobre digest MD5 (protocolo AllinPay).

O gateway não assina o texto diretamente: calcula MD5 do texto, codifica o
digest em base64 e assina o *texto* base64 (UTF-8) com RSA-SHA1. A ordem
digest → base64 → assinatura precisa ser reproduzida exatamente.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.hashes import SHA1

from .constants import SIGNATURE_PADDING, TEXT_ENCODING
from .errors import GatewayCryptoError

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import rsa


def md5_base64(payload: str) -> str:
    """Retorna base64 do digest MD5 bruto dos bytes UTF-8 de `payload`."""
    digest = hashlib.md5(payload.encode(TEXT_ENCODING)).digest()  # noqa: S324
    return base64.b64encode(digest).decode("ascii")


def sign_plain(payload: str, private_key: rsa.RSAPrivateKey) -> str:
    """Assina `payload` com RSA-SHA1 (sem etapa MD5) e retorna base64.

    Raises:
        GatewayCryptoError: Se a chave não conseguir assinar
    """
    try:
        signature = private_key.sign(
            payload.encode(TEXT_ENCODING),
            SIGNATURE_PADDING,
            SHA1(),  # noqa: S303
        )
    except Exception as exc:
        raise GatewayCryptoError(f"Signing failed: {exc}") from exc
    return base64.b64encode(signature).decode("ascii")


def sign_payload(payload: str, private_key: rsa.RSAPrivateKey) -> str:
    """Assina `payload` no formato do gateway (MD5 → base64 → RSA-SHA1).

    Args:
        payload: Texto de entrada (string canônica já concatenada)
        private_key: Chave privada local

    Returns:
        Assinatura em base64
    """
    return sign_plain(md5_base64(payload), private_key)


def verify_payload(
    payload: str | None,
    signature_b64: str | None,
    public_key: rsa.RSAPublicKey,
) -> bool:
    """Verifica assinatura do gateway sobre `payload`.

    Nunca levanta exceção por falha criptográfica: assinatura divergente,
    base64 malformado ou campos ausentes resultam em False.

    Args:
        payload: Texto assinado pela contraparte
        signature_b64: Assinatura em base64
        public_key: Chave pública da contraparte

    Returns:
        True se assinatura válida
    """
    if not isinstance(payload, str) or not isinstance(signature_b64, str):
        return False
    # base64 quebrado em linhas (76 colunas, CRLF) é aceito
    compact = "".join(signature_b64.split())
    if not compact:
        return False

    try:
        signature = base64.b64decode(compact, validate=True)
    except (ValueError, binascii.Error):
        return False

    try:
        public_key.verify(
            signature,
            md5_base64(payload).encode(TEXT_ENCODING),
            SIGNATURE_PADDING,
            SHA1(),  # noqa: S303
        )
    except (InvalidSignature, ValueError):
        return False
    return True
