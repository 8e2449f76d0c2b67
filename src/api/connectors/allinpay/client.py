"""Cliente do gateway AllinPay (orquestração request → resposta).

Fluxo de `call`:
1. Monta envelope assinado (request_builder)
2. GET <endpoint>/service/soa via transporte injetado
3. Dispara on_request sempre e on_request_too_long acima do limiar
4. Valida status/assinatura/payload; em falha dispara on_request_error
   e propaga o erro

Nenhum estado mutável é compartilhado entre chamadas: credenciais são
imutáveis após a construção, então chamadas concorrentes não precisam de lock.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.infra.crypto import (
    ALLOW_MARK_FIELD,
    decrypt_fields,
    encrypt_fields,
    load_private_key,
    load_public_key,
    sign_plain,
)
from app.observability import (
    get_correlation_id,
    record_gateway_error,
    record_latency,
    record_slow_request,
)
from app.protocols.gateway import RequestTiming

from .canonical import canonical_json
from .errors import AllinPayError, GatewayConfigError, TaggedAllowableError
from .observer import NoopGatewayObserver
from .request_builder import build_gateway_url, build_request_envelope
from .response_validator import validate_callback_result, validate_gateway_result

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from datetime import datetime

    from cryptography.hazmat.primitives.asymmetric import rsa

    from app.protocols.gateway import GatewayObserverProtocol, GatewayTransportProtocol
    from config.settings import AllinPaySettings

    from .envelope import RequestEnvelope

logger = logging.getLogger(__name__)

COMPONENT = "allinpay"


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class AllinPayCredentials:
    """Credenciais imutáveis do cliente (carregadas uma vez)."""

    sys_id: str
    private_key: rsa.RSAPrivateKey = field(repr=False)
    allinpay_public_key: rsa.RSAPublicKey = field(repr=False)
    bank_private_key: rsa.RSAPrivateKey | None = field(default=None, repr=False)

    @classmethod
    def from_settings(cls, settings: AllinPaySettings) -> AllinPayCredentials:
        """Carrega as chaves PEM das settings.

        Raises:
            GatewayCryptoError: Se alguma chave configurada for inválida
        """
        bank_key = (
            load_private_key(settings.bank_private_key_pem)
            if settings.bank_private_key_pem
            else None
        )
        return cls(
            sys_id=settings.sys_id,
            private_key=load_private_key(settings.private_key_pem),
            allinpay_public_key=load_public_key(settings.allinpay_public_key_pem),
            bank_private_key=bank_key,
        )


class AllinPayClient:
    """Cliente assinado do gateway SOA da AllinPay.

    Args:
        settings: Endpoint, sysid, chaves e limiares
        transport: Implementação de GatewayTransportProtocol (httpx por padrão)
        observer: Hooks de observação (no-op por padrão)
        credentials: Credenciais já carregadas (evita reler PEM das settings)
        now: Relógio do timestamp do envelope (testes)
        clock_ms: Relógio de parede em epoch ms para medir latência (testes)
    """

    def __init__(
        self,
        settings: AllinPaySettings,
        transport: GatewayTransportProtocol | None = None,
        observer: GatewayObserverProtocol | None = None,
        *,
        credentials: AllinPayCredentials | None = None,
        now: Callable[[], datetime] | None = None,
        clock_ms: Callable[[], int] = now_ms,
    ) -> None:
        if transport is None:
            from .http_client import create_allinpay_http_client

            transport = create_allinpay_http_client(settings)
        self._settings = settings
        self._credentials = credentials or AllinPayCredentials.from_settings(settings)
        self._transport = transport
        self._observer = observer or NoopGatewayObserver()
        self._now = now
        self._clock_ms = clock_ms

    @property
    def settings(self) -> AllinPaySettings:
        return self._settings

    @property
    def credentials(self) -> AllinPayCredentials:
        return self._credentials

    def build_envelope(
        self,
        service: str,
        method: str,
        param: dict[str, Any],
    ) -> RequestEnvelope:
        """Envelope assinado novo (timestamp gerado agora)."""
        return build_request_envelope(
            sys_id=self._credentials.sys_id,
            service=service,
            method=method,
            param=param,
            private_key=self._credentials.private_key,
            timezone=self._settings.timezone,
            now=self._now,
        )

    async def call(self, service: str, method: str, param: dict[str, Any]) -> Any:
        """Executa `service.method(param)` e retorna o payload verificado.

        Raises:
            GatewayStatusError: status != "OK" ou corpo não-JSON
            SignatureVerificationError: assinatura do retorno não confere
            PayloadParseError: signedValue não é JSON
            HttpError: falha de conexão ou 5xx (sem disparar hooks)
        """
        return await self._call(service, method, param, allow=None)

    async def call_allowing(
        self,
        service: str,
        method: str,
        param: dict[str, Any],
        allow: str,
        patch: Mapping[str, Any] | None = None,
    ) -> Any:
        """Como `call`, mas absorve o erro cujo errorCode é `allow`.

        No erro permitido retorna `{**param, **patch, "allow": allow}`;
        qualquer outro erro propaga.
        """
        try:
            return await self._call(service, method, param, allow=allow)
        except TaggedAllowableError as exc:
            if exc.mark != allow:
                raise
            logger.info(
                "allinpay_allowed_error",
                extra={"operation": f"{service}.{method}", "error_code": exc.mark},
            )
            return {**param, **(patch or {}), ALLOW_MARK_FIELD: allow}

    async def _call(
        self,
        service: str,
        method: str,
        param: dict[str, Any],
        allow: str | None,
    ) -> Any:
        operation = f"{service}.{method}"
        params = self.build_envelope(service, method, param).as_params()

        start_at = self._clock_ms()
        response = await self._transport.get_json(self._settings.soa_url, params)
        timing = RequestTiming(start_at=start_at, end_at=self._clock_ms())

        correlation_id = get_correlation_id()
        self._observer.on_request(params, response)
        record_latency(COMPONENT, operation, timing.elapsed_ms, correlation_id)
        if timing.elapsed_ms > self._settings.too_long_threshold_ms:
            record_slow_request(
                COMPONENT,
                operation,
                timing.elapsed_ms,
                self._settings.too_long_threshold_ms,
                correlation_id,
            )
            self._observer.on_request_too_long(params, response, timing)

        try:
            return validate_gateway_result(
                response,
                self._credentials.allinpay_public_key,
                allow=allow,
            )
        except AllinPayError as exc:
            record_gateway_error(
                COMPONENT,
                operation,
                type(exc).__name__,
                exc.mark,
                correlation_id,
            )
            self._observer.on_request_error(params, response, exc)
            raise

    def gateway_url(
        self,
        path: str,
        service: str,
        method: str,
        param: dict[str, Any],
    ) -> str:
        """URL assinada para fluxos de redirecionamento ao gateway."""
        envelope = self.build_envelope(service, method, param)
        return build_gateway_url(self._settings.endpoint, path, envelope)

    def encrypt_fields(self, param: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
        """Cifra campos sensíveis com a chave pública da AllinPay."""
        return encrypt_fields(param, fields, self._credentials.allinpay_public_key)

    def decrypt_fields(self, param: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
        """Decifra campos com a chave privada local (no-op se houver `allow`)."""
        return decrypt_fields(param, fields, self._credentials.private_key)

    def sign_bank_transfer(
        self,
        payee_acct_no: str,
        payee_acct_name: str,
        amount: str,
        summary: str = "",
    ) -> str:
        """Atestado RSA-SHA1 (base64) para transferência bancária.

        Assina o JSON canônico `{AMOUNT, PAYEE_ACCT_NAME, PAYEE_ACCT_NO, SUMMARY}`
        com a chave privada do banco, fora do protocolo request/resposta.

        Raises:
            GatewayConfigError: chave do banco não configurada
        """
        bank_key = self._credentials.bank_private_key
        if bank_key is None:
            raise GatewayConfigError("ALLINPAY_BANK_PRIVATE_KEY não configurado")

        payload = canonical_json(
            {
                "AMOUNT": amount,
                "PAYEE_ACCT_NAME": payee_acct_name,
                "PAYEE_ACCT_NO": payee_acct_no,
                "SUMMARY": summary,
            }
        )
        return sign_plain(payload, bank_key)

    def verify_callback(self, result: Mapping[str, Any]) -> Any:
        """Valida notificação (`sysid + rps + timestamp`) e retorna o `rps`."""
        return validate_callback_result(result, self._credentials.allinpay_public_key)

    def receive_notification(self, body: Mapping[str, Any]) -> Any:
        """Dispara on_back_receive e valida a notificação recebida."""
        self._observer.on_back_receive(body)
        return self.verify_callback(body)

    async def aclose(self) -> None:
        """Libera o transporte, se ele mantiver conexões."""
        close = getattr(self._transport, "aclose", None)
        if callable(close):
            await close()
