"""Carregamento de chaves RSA em PEM."""

from __future__ import annotations

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .errors import GatewayCryptoError


def _normalize_pem(pem: str | bytes) -> bytes:
    """Aceita PEM em str/bytes e restaura quebras de linha escapadas (env vars)."""
    text = pem.decode("utf-8") if isinstance(pem, bytes) else pem
    return text.strip().replace("\\n", "\n").encode("utf-8")


def load_private_key(
    private_key_pem: str | bytes,
    passphrase: str | None = None,
) -> rsa.RSAPrivateKey:
    """Carrega chave privada RSA em formato PEM (PKCS#1 ou PKCS#8).

    Args:
        private_key_pem: Chave privada em formato PEM
        passphrase: Senha da chave (opcional)

    Returns:
        Objeto de chave privada RSA

    Raises:
        GatewayCryptoError: Se chave inválida ou não-RSA
    """
    if not private_key_pem:
        raise GatewayCryptoError("Invalid private key: empty PEM")

    passphrase_bytes = passphrase.encode() if passphrase and passphrase.strip() else None

    def _load(password: bytes | None) -> object:
        return serialization.load_pem_private_key(
            _normalize_pem(private_key_pem),
            password=password,
            backend=default_backend(),
        )

    try:
        key = _load(passphrase_bytes)
    except Exception as exc:
        # Permite fallback quando a chave não está criptografada, mas uma
        # passphrase foi injetada por configuração.
        exc_text = str(exc).lower()
        if not (passphrase_bytes and "private key is not encrypted" in exc_text):
            raise GatewayCryptoError(f"Invalid private key: {exc}") from exc
        try:
            key = _load(None)
        except Exception as retry_exc:
            raise GatewayCryptoError(f"Invalid private key: {retry_exc}") from retry_exc

    if not isinstance(key, rsa.RSAPrivateKey):
        raise GatewayCryptoError("Invalid private key: not an RSA key")
    return key


def load_public_key(public_key_pem: str | bytes) -> rsa.RSAPublicKey:
    """Carrega chave pública RSA em PEM (SubjectPublicKeyInfo ou PKCS#1).

    Raises:
        GatewayCryptoError: Se chave inválida ou não-RSA
    """
    if not public_key_pem:
        raise GatewayCryptoError("Invalid public key: empty PEM")

    try:
        key = serialization.load_pem_public_key(
            _normalize_pem(public_key_pem),
            backend=default_backend(),
        )
    except Exception as exc:
        raise GatewayCryptoError(f"Invalid public key: {exc}") from exc

    if not isinstance(key, rsa.RSAPublicKey):
        raise GatewayCryptoError("Invalid public key: not an RSA key")
    return key
