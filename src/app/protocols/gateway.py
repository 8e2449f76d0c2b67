"""Protocolos do gateway de pagamento (transporte e observadores).

O cliente AllinPay depende apenas destes contratos: o transporte HTTP e os
hooks de observação são colaboradores injetados.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class RequestTiming:
    """Instantes (epoch ms) de início e fim de uma chamada ao gateway."""

    start_at: int
    end_at: int

    @property
    def elapsed_ms(self) -> int:
        return self.end_at - self.start_at


class GatewayTransportProtocol(Protocol):
    """Contrato mínimo de transporte: GET com query string.

    Retorna o corpo JSON decodificado ou, se não for JSON, o texto bruto.
    """

    async def get_json(self, url: str, params: Mapping[str, str]) -> Any: ...


class GatewayObserverProtocol(Protocol):
    """Hooks síncronos disparados pelo cliente do gateway.

    - on_request: toda resposta recebida (params assinados + corpo bruto)
    - on_request_error: validação da resposta falhou
    - on_request_too_long: chamada acima do limiar de latência
    - on_back_receive: notificação assíncrona recebida do gateway
    """

    def on_request(self, params: Mapping[str, str], response: Any) -> None: ...

    def on_request_error(
        self,
        params: Mapping[str, str],
        response: Any,
        error: Exception,
    ) -> None: ...

    def on_request_too_long(
        self,
        params: Mapping[str, str],
        response: Any,
        timing: RequestTiming,
    ) -> None: ...

    def on_back_receive(self, body: Mapping[str, Any]) -> None: ...
