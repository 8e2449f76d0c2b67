"""API: camada de borda com o gateway AllinPay.

Responsabilidades:
- Falar com o gateway (envelope assinado, validação de respostas)
- Receber notificações assíncronas e validar assinaturas
- Expor endpoints HTTP (notificações, health)

Subpastas:
- connectors/: adapter do gateway AllinPay
- routes/: endpoints HTTP

NÃO PODE conter: regras de negócio dos métodos do gateway.
"""
