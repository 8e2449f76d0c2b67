"""App: orquestração, infraestrutura e composição do serviço.

Subpastas:
- bootstrap/: composition root (logging, settings, cliente AllinPay)
- infra/: implementações concretas (criptografia RSA, secrets)
- protocols/: contratos (transporte e observers do gateway)
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura.
"""
