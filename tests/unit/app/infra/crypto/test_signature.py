"""Testes da assinatura MD5 + RSA-SHA1 do gateway."""

from __future__ import annotations

import base64
import hashlib

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from app.infra.crypto.signature import md5_base64, sign_payload, sign_plain, verify_payload


def test_md5_base64_matches_raw_digest() -> None:
    expected = base64.b64encode(hashlib.md5("pagamento".encode("utf-8")).digest()).decode()
    assert md5_base64("pagamento") == expected


def test_sign_payload_signs_base64_text_of_digest(merchant_keys) -> None:
    payload = 'sys1{"service":"pay","method":"query","param":{}}2026-10-19 10:00:00'
    signature = base64.b64decode(sign_payload(payload, merchant_keys.private_key))

    # Assinatura cobre o texto base64 do MD5, não os bytes brutos do digest
    merchant_keys.public_key.verify(
        signature,
        md5_base64(payload).encode("utf-8"),
        padding.PKCS1v15(),
        hashes.SHA1(),
    )


def test_sign_verify_roundtrip(merchant_keys) -> None:
    for payload in ["", "abc", '{"a":"ação","b":[1,2]}', "支付系统"]:
        signature = sign_payload(payload, merchant_keys.private_key)
        assert verify_payload(payload, signature, merchant_keys.public_key) is True


def test_verify_detects_tampered_payload(merchant_keys) -> None:
    signature = sign_payload('{"amount":100}', merchant_keys.private_key)
    assert verify_payload('{"amount":101}', signature, merchant_keys.public_key) is False


def test_verify_detects_tampered_signature(merchant_keys) -> None:
    signature = bytearray(base64.b64decode(sign_payload("payload", merchant_keys.private_key)))
    signature[10] ^= 0x01
    tampered = base64.b64encode(bytes(signature)).decode()
    assert verify_payload("payload", tampered, merchant_keys.public_key) is False


def test_verify_with_wrong_key_returns_false(merchant_keys, allinpay_keys) -> None:
    signature = sign_payload("payload", merchant_keys.private_key)
    assert verify_payload("payload", signature, allinpay_keys.public_key) is False


def test_verify_accepts_line_wrapped_signature(merchant_keys) -> None:
    signature = sign_payload('{"a":1}', merchant_keys.private_key)
    wrapped = "\r\n".join(signature[i : i + 76] for i in range(0, len(signature), 76))

    assert "\r\n" in wrapped
    assert verify_payload('{"a":1}', wrapped, merchant_keys.public_key) is True


def test_verify_accepts_surrounding_whitespace(merchant_keys) -> None:
    signature = sign_payload("payload", merchant_keys.private_key)
    assert verify_payload("payload", f"  {signature}\n", merchant_keys.public_key) is True


@pytest.mark.parametrize("signature", ["", " \r\n ", "%%%not-base64%%%", "YWJj", None])
def test_verify_malformed_signature_returns_false(merchant_keys, signature) -> None:
    assert verify_payload("payload", signature, merchant_keys.public_key) is False


def test_verify_missing_payload_returns_false(merchant_keys) -> None:
    signature = sign_payload("payload", merchant_keys.private_key)
    assert verify_payload(None, signature, merchant_keys.public_key) is False


def test_sign_plain_skips_digest_step(bank_keys) -> None:
    signature = base64.b64decode(sign_plain('{"AMOUNT":"1"}', bank_keys.private_key))
    bank_keys.public_key.verify(
        signature,
        b'{"AMOUNT":"1"}',
        padding.PKCS1v15(),
        hashes.SHA1(),
    )
