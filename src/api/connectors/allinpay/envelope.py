"""Envelopes de fio do gateway AllinPay."""

from __future__ import annotations

from dataclasses import dataclass

# Campos do resultado de chamada (service/soa)
FIELD_STATUS = "status"
FIELD_MESSAGE = "message"
FIELD_ERROR_CODE = "errorCode"
FIELD_SIGNED_VALUE = "signedValue"
FIELD_SIGN = "sign"

# Campos da notificação assíncrona
FIELD_SYSID = "sysid"
FIELD_RPS = "rps"
FIELD_TIMESTAMP = "timestamp"

STATUS_OK = "OK"


@dataclass(frozen=True, slots=True)
class RequestEnvelope:
    """Request assinado, pronto para o transporte.

    Construído a cada chamada; nunca reaproveitado entre chamadas.
    `sign` foi calculado sobre `sysid + req + timestamp`.
    """

    sysid: str
    v: str
    timestamp: str
    sign: str
    req: str

    @property
    def signing_input(self) -> str:
        return f"{self.sysid}{self.req}{self.timestamp}"

    def as_params(self) -> dict[str, str]:
        """Query params na ordem esperada pelo gateway."""
        return {
            "sysid": self.sysid,
            "v": self.v,
            "timestamp": self.timestamp,
            "sign": self.sign,
            "req": self.req,
        }
