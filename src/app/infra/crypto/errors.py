"""Erros de criptografia do protocolo AllinPay.

Definido em app/infra para manter boundaries corretas.
Re-exportado por api/connectors/allinpay para os consumidores do cliente.
"""


class GatewayCryptoError(Exception):
    """Erro em operação criptográfica (chave inválida, ciphertext corrompido)."""
