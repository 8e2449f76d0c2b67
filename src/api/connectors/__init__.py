"""Connectors: adapters de borda para APIs externas.

Estrutura:
- allinpay/: gateway SOA de pagamentos AllinPay
"""

__all__: list[str] = []
