"""Cifra de campos sensíveis (RSA PKCS#1 v1.5, hex maiúsculo).

Independente da assinatura do envelope: cada campo nomeado pelo chamador é
cifrado isoladamente com a chave pública da AllinPay e decifrado com a chave
privada local. O protocolo não adiciona nonce/salt por campo.
"""

from __future__ import annotations

import binascii
import copy
from typing import TYPE_CHECKING, Any

from .constants import FIELD_CIPHER_PADDING, PKCS1_V15_OVERHEAD, TEXT_ENCODING
from .errors import GatewayCryptoError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from cryptography.hazmat.primitives.asymmetric import rsa

# Marcador que desliga a decifragem (respostas com exceção permitida)
ALLOW_MARK_FIELD = "allow"


def encrypt_value(value: str, public_key: rsa.RSAPublicKey) -> str:
    """Cifra `value` e retorna ciphertext em hex maiúsculo.

    String vazia é devolvida sem alteração.

    Raises:
        GatewayCryptoError: Se a cifragem falhar (ex.: valor maior que o bloco RSA)
    """
    if not value:
        return value

    plaintext = value.encode(TEXT_ENCODING)
    max_len = public_key.key_size // 8 - PKCS1_V15_OVERHEAD
    if len(plaintext) > max_len:
        raise GatewayCryptoError(
            f"Field encryption failed: {len(plaintext)} bytes exceeds RSA block limit {max_len}"
        )
    try:
        ciphertext = public_key.encrypt(plaintext, FIELD_CIPHER_PADDING)
    except Exception as exc:
        raise GatewayCryptoError(f"Field encryption failed: {exc}") from exc
    return ciphertext.hex().upper()


def decrypt_value(hex_value: str, private_key: rsa.RSAPrivateKey) -> str:
    """Decifra ciphertext hex (maiúsculo ou minúsculo) para texto UTF-8.

    Raises:
        GatewayCryptoError: Se hex inválido, ciphertext corrompido ou chave errada
    """
    try:
        ciphertext = bytes.fromhex(hex_value)
    except (ValueError, TypeError) as exc:
        raise GatewayCryptoError(f"Invalid hex ciphertext: {exc}") from exc

    try:
        plaintext = private_key.decrypt(ciphertext, FIELD_CIPHER_PADDING)
        return plaintext.decode(TEXT_ENCODING)
    except (ValueError, UnicodeDecodeError, binascii.Error) as exc:
        raise GatewayCryptoError(f"Field decryption failed: {exc}") from exc


def _get_path(data: Mapping[str, Any], path: str) -> Any:
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def _set_path(data: dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    current = data
    for key in parents:
        current = current[key]
    current[leaf] = value


def encrypt_fields(
    param: Mapping[str, Any],
    fields: Iterable[str],
    public_key: rsa.RSAPublicKey,
) -> dict[str, Any]:
    """Retorna cópia de `param` com os campos nomeados cifrados.

    Nomes aceitam caminho pontuado (ex.: "card.number"). Campos ausentes
    ou falsy são ignorados sem erro.
    """
    result = copy.deepcopy(dict(param))
    for field in fields:
        value = _get_path(result, field)
        if value:
            _set_path(result, field, encrypt_value(str(value), public_key))
    return result


def decrypt_fields(
    param: Mapping[str, Any],
    fields: Iterable[str],
    private_key: rsa.RSAPrivateKey,
) -> dict[str, Any]:
    """Retorna cópia de `param` com os campos nomeados decifrados.

    Se a estrutura carrega o marcador `allow`, nenhum campo é tocado:
    os valores passam crus, mesmo que não sejam ciphertext válido.
    """
    result = copy.deepcopy(dict(param))
    if result.get(ALLOW_MARK_FIELD):
        return result

    for field in fields:
        value = _get_path(result, field)
        if value:
            _set_path(result, field, decrypt_value(str(value), private_key))
    return result
