"""Agregador de settings do serviço de gateway AllinPay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Gateway settings
from config.settings.allinpay import (
    PROTOCOL_VERSION,
    SOA_PATH,
    TOO_LONG_THRESHOLD_MS,
    AllinPaySettings,
    get_allinpay_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "PROTOCOL_VERSION",
    "SOA_PATH",
    "TOO_LONG_THRESHOLD_MS",
    "AllinPaySettings",
    "BaseSettings",
    "Environment",
    "get_allinpay_settings",
    "get_base_settings",
]
