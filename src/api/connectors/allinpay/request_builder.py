"""Montagem do request assinado (canonicaliza → timestamp → assina)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode
from zoneinfo import ZoneInfo

from app.infra.crypto import sign_payload
from config.settings.allinpay import DEFAULT_TIMEZONE, PROTOCOL_VERSION

from .canonical import canonicalize
from .envelope import RequestEnvelope

if TYPE_CHECKING:
    from collections.abc import Callable

    from cryptography.hazmat.primitives.asymmetric import rsa

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Mesmo conjunto não-escapado do querystring.escape do Node
_QUERY_SAFE_CHARS = "-_.!~*'()"


def gateway_timestamp(
    timezone: str = DEFAULT_TIMEZONE,
    now: Callable[[], datetime] | None = None,
) -> str:
    """Timestamp `YYYY-MM-DD HH:MM:SS` no fuso do gateway.

    Args:
        timezone: Nome IANA do fuso (ex.: Asia/Shanghai)
        now: Relógio injetável (testes); deve retornar datetime aware
    """
    current = now() if now else datetime.now(ZoneInfo(timezone))
    if current.tzinfo is not None:
        current = current.astimezone(ZoneInfo(timezone))
    return current.strftime(TIMESTAMP_FORMAT)


def build_request_envelope(
    *,
    sys_id: str,
    service: str,
    method: str,
    param: dict[str, Any],
    private_key: rsa.RSAPrivateKey,
    timezone: str = DEFAULT_TIMEZONE,
    now: Callable[[], datetime] | None = None,
) -> RequestEnvelope:
    """Monta envelope assinado para `service.method(param)`.

    A assinatura cobre `sysid + req + timestamp` com o mesmo `req` que
    segue para o transporte e para os observers.

    Raises:
        TypeError/ValueError: `param` não serializável (erro de programação)
    """
    req = canonicalize(service, method, param)
    timestamp = gateway_timestamp(timezone, now)
    sign = sign_payload(f"{sys_id}{req}{timestamp}", private_key)
    return RequestEnvelope(
        sysid=sys_id,
        v=PROTOCOL_VERSION,
        timestamp=timestamp,
        sign=sign,
        req=req,
    )


def encode_query(params: dict[str, str]) -> str:
    """Query string no formato do `querystring.stringify` (espaço → %20)."""
    return urlencode(params, quote_via=quote, safe=_QUERY_SAFE_CHARS)


def build_gateway_url(endpoint: str, path: str, envelope: RequestEnvelope) -> str:
    """URL de redirecionamento para o gateway com o envelope na query."""
    return f"{endpoint.rstrip('/')}{path}?{encode_query(envelope.as_params())}"
