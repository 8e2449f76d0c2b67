"""Endpoint de notificação assíncrona da AllinPay.

Endpoints:
- POST /notify/allinpay: recebimento de notificações (form ou JSON)

Fluxo:
1. Dispara on_back_receive com o corpo recebido
2. Verifica assinatura sobre `sysid + rps + timestamp`
3. Interpreta `rps` e entrega ao handler configurado (se houver)
4. Responde "success" em texto puro (o gateway re-notifica caso contrário)
"""

from __future__ import annotations

import inspect
import json
import logging
from typing import Any
from urllib.parse import parse_qsl

from fastapi import APIRouter, Request, Response, status

from api.connectors.allinpay import (
    AllinPayClient,
    PayloadParseError,
    SignatureVerificationError,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

ACK_CONTENT = "success"


class InvalidNotificationBodyError(ValueError):
    """Corpo da notificação ilegível."""


async def _read_notification_body(request: Request) -> dict[str, Any]:
    raw_body = await request.body()
    content_type = request.headers.get("content-type", "")

    if "application/json" in content_type:
        try:
            payload = json.loads(raw_body or b"{}")
        except json.JSONDecodeError as exc:
            raise InvalidNotificationBodyError("invalid_json") from exc
        if not isinstance(payload, dict):
            raise InvalidNotificationBodyError("payload_not_object")
        return payload

    try:
        text = raw_body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidNotificationBodyError("invalid_encoding") from exc
    return dict(parse_qsl(text, keep_blank_values=True))


def _plain(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.post("", response_model=None)
async def receive_notification(request: Request) -> Response:
    """Recebe notificação do gateway e confirma com "success".

    Returns:
        200 "success" se assinatura e payload válidos; 400 caso contrário.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        client: AllinPayClient | None = getattr(request.app.state, "allinpay_client", None)
        if client is None:
            logger.error(
                "allinpay_notify_client_unavailable",
                extra={"correlation_id": get_correlation_id()},
            )
            return _plain("gateway not configured", status.HTTP_503_SERVICE_UNAVAILABLE)

        try:
            body = await _read_notification_body(request)
            payload = client.receive_notification(body)
        except InvalidNotificationBodyError as exc:
            logger.warning(
                "allinpay_notify_body_invalid",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return _plain("invalid body", status.HTTP_400_BAD_REQUEST)
        except (SignatureVerificationError, PayloadParseError) as exc:
            logger.warning(
                "allinpay_notify_rejected",
                extra={
                    "correlation_id": get_correlation_id(),
                    "error_type": type(exc).__name__,
                },
            )
            return _plain(exc.message, status.HTTP_400_BAD_REQUEST)

        handler = getattr(request.app.state, "allinpay_notification_handler", None)
        if handler is not None:
            result = handler(payload)
            if inspect.isawaitable(result):
                await result

        logger.info(
            "allinpay_notify_received",
            extra={"correlation_id": get_correlation_id(), "handled": handler is not None},
        )
        return _plain(ACK_CONTENT, status.HTTP_200_OK)
    finally:
        reset_correlation_id(token)
