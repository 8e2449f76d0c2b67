"""Conector AllinPay: adapter de borda para o gateway SOA de pagamentos.

Este módulo é o único ponto de IO com o gateway.
Responsabilidades:
- String canônica e envelope assinado do request
- Validação de assinatura de respostas e notificações
- Cifra de campos sensíveis
- HTTP client (httpx) para service/soa
- Hooks de observação (on_request, on_request_error, ...)
"""

from .canonical import canonical_json, canonicalize
from .client import AllinPayClient, AllinPayCredentials
from .envelope import RequestEnvelope
from .errors import (
    AllinPayError,
    GatewayConfigError,
    GatewayCryptoError,
    GatewayStatusError,
    PayloadParseError,
    SignatureVerificationError,
    TaggedAllowableError,
)
from .http_base import HttpError
from .http_client import AllinPayHttpClient, create_allinpay_http_client
from .observer import LoggingGatewayObserver, NoopGatewayObserver
from .request_builder import build_gateway_url, build_request_envelope
from .response_validator import validate_callback_result, validate_gateway_result

__all__ = [
    "AllinPayClient",
    "AllinPayCredentials",
    "AllinPayError",
    "AllinPayHttpClient",
    "GatewayConfigError",
    "GatewayCryptoError",
    "GatewayStatusError",
    "HttpError",
    "LoggingGatewayObserver",
    "NoopGatewayObserver",
    "PayloadParseError",
    "RequestEnvelope",
    "SignatureVerificationError",
    "TaggedAllowableError",
    "build_gateway_url",
    "build_request_envelope",
    "canonical_json",
    "canonicalize",
    "create_allinpay_http_client",
    "validate_callback_result",
    "validate_gateway_result",
]
