"""Configuração do pytest para o serviço de gateway AllinPay."""

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@dataclass(frozen=True)
class KeyPair:
    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey
    private_pem: str
    public_pem: str


def _generate_keypair() -> KeyPair:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    public_key = private_key.public_key()
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")
    return KeyPair(private_key, public_key, private_pem, public_pem)


@pytest.fixture(scope="session")
def merchant_keys() -> KeyPair:
    """Par de chaves local (assina requests, decifra campos)."""
    return _generate_keypair()


@pytest.fixture(scope="session")
def allinpay_keys() -> KeyPair:
    """Par de chaves da AllinPay (assina respostas, recebe campos cifrados)."""
    return _generate_keypair()


@pytest.fixture(scope="session")
def bank_keys() -> KeyPair:
    """Par de chaves do banco (atestado de transferência)."""
    return _generate_keypair()
