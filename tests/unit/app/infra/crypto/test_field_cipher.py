"""Testes da cifra de campos sensíveis (PKCS#1 v1.5, hex maiúsculo)."""

from __future__ import annotations

import pytest

from app.infra.crypto.errors import GatewayCryptoError
from app.infra.crypto.field_cipher import (
    decrypt_fields,
    decrypt_value,
    encrypt_fields,
    encrypt_value,
)


def test_encrypt_value_returns_uppercase_hex(allinpay_keys) -> None:
    ciphertext = encrypt_value("6222020202020202", allinpay_keys.public_key)

    assert ciphertext == ciphertext.upper()
    assert len(ciphertext) == 2 * 256  # bloco de chave 2048 bits
    int(ciphertext, 16)


@pytest.mark.parametrize("value", ["a", "João da Silva", "张三", "x" * 200])
def test_encrypt_decrypt_roundtrip(allinpay_keys, value) -> None:
    ciphertext = encrypt_value(value, allinpay_keys.public_key)
    assert decrypt_value(ciphertext, allinpay_keys.private_key) == value


def test_decrypt_accepts_lowercase_hex(allinpay_keys) -> None:
    ciphertext = encrypt_value("abc", allinpay_keys.public_key).lower()
    assert decrypt_value(ciphertext, allinpay_keys.private_key) == "abc"


def test_encrypt_empty_string_is_unchanged(allinpay_keys) -> None:
    assert encrypt_value("", allinpay_keys.public_key) == ""


def test_decrypt_invalid_hex_raises(allinpay_keys) -> None:
    with pytest.raises(GatewayCryptoError, match="Invalid hex ciphertext"):
        decrypt_value("ZZ-not-hex", allinpay_keys.private_key)


def test_decrypt_with_wrong_key_raises(allinpay_keys, merchant_keys) -> None:
    ciphertext = encrypt_value("segredo", allinpay_keys.public_key)
    # OpenSSL com implicit rejection devolve bytes sintéticos em vez de erro
    try:
        result = decrypt_value(ciphertext, merchant_keys.private_key)
    except GatewayCryptoError:
        return
    assert result != "segredo"


def test_encrypt_value_too_long_raises(allinpay_keys) -> None:
    with pytest.raises(GatewayCryptoError, match="Field encryption failed"):
        encrypt_value("x" * 300, allinpay_keys.public_key)


def test_encrypt_fields_only_touches_named_truthy_fields(allinpay_keys) -> None:
    param = {"name": "Maria", "identityNo": "123", "phone": "", "bizUserId": "u1"}

    result = encrypt_fields(param, ["identityNo", "phone", "missing"], allinpay_keys.public_key)

    assert result["name"] == "Maria"
    assert result["bizUserId"] == "u1"
    assert result["phone"] == ""
    assert "missing" not in result
    assert result["identityNo"] != "123"
    assert decrypt_value(result["identityNo"], allinpay_keys.private_key) == "123"
    # original intacto
    assert param["identityNo"] == "123"


def test_encrypt_decrypt_fields_roundtrip_with_dotted_path(allinpay_keys) -> None:
    param = {"card": {"number": "6222000011112222", "holder": "Ana"}, "amount": 10}

    encrypted = encrypt_fields(param, ["card.number"], allinpay_keys.public_key)
    decrypted = decrypt_fields(encrypted, ["card.number"], allinpay_keys.private_key)

    assert encrypted["card"]["holder"] == "Ana"
    assert encrypted["card"]["number"] != "6222000011112222"
    assert decrypted == param


def test_decrypt_fields_with_allow_mark_passes_values_raw(allinpay_keys) -> None:
    param = {"allow": "INSUFFICIENT_FUNDS", "cardNo": "not-a-ciphertext", "phone": "123"}

    result = decrypt_fields(param, ["cardNo", "phone"], allinpay_keys.private_key)

    assert result == param


def test_decrypt_fields_skips_absent_fields(allinpay_keys) -> None:
    param = {"cardNo": encrypt_value("6222", allinpay_keys.public_key)}

    result = decrypt_fields(param, ["cardNo", "phone"], allinpay_keys.private_key)

    assert result == {"cardNo": "6222"}
