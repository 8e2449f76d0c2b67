"""Router principal da AllinPay: agrega os endpoints do gateway."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.allinpay.notify import router as notify_router

NOTIFY_PREFIX = "/notify/allinpay"

router = APIRouter()

# Notificações assíncronas (POST exatamente em /notify/allinpay, sem barra final)
router.include_router(notify_router, prefix=NOTIFY_PREFIX)
