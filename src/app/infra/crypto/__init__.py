"""Módulo de criptografia do protocolo AllinPay.

Este módulo contém as primitivas RSA usadas pelo gateway de pagamento
(assinatura MD5 + RSA-SHA1, cifra de campos PKCS#1 v1.5).

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
- api/connectors/allinpay compõe estas primitivas no protocolo completo
"""

from .errors import GatewayCryptoError
from .field_cipher import (
    ALLOW_MARK_FIELD,
    decrypt_fields,
    decrypt_value,
    encrypt_fields,
    encrypt_value,
)
from .keys import load_private_key, load_public_key
from .signature import md5_base64, sign_payload, sign_plain, verify_payload

__all__ = [
    "ALLOW_MARK_FIELD",
    "GatewayCryptoError",
    "decrypt_fields",
    "decrypt_value",
    "encrypt_fields",
    "encrypt_value",
    "load_private_key",
    "load_public_key",
    "md5_base64",
    "sign_payload",
    "sign_plain",
    "verify_payload",
]
