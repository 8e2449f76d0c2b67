"""Constantes criptográficas do protocolo AllinPay."""

from cryptography.hazmat.primitives.asymmetric import padding

# Assinatura e cifra de campos usam PKCS#1 v1.5 (RSA-SHA1 / RSA_PKCS1_PADDING)
SIGNATURE_PADDING = padding.PKCS1v15()
FIELD_CIPHER_PADDING = padding.PKCS1v15()
PKCS1_V15_OVERHEAD = 11  # bytes de padding por bloco
TEXT_ENCODING = "utf-8"
