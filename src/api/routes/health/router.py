"""Endpoint de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    gateway_configured: bool
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: serviço de pé e cliente do gateway montado."""
    client = getattr(request.app.state, "allinpay_client", None)
    return HealthResponse(
        status="healthy",
        service="allinpay-gateway",
        timestamp=datetime.now(UTC).isoformat(),
        gateway_configured=client is not None,
    )
