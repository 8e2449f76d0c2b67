"""Protocolos e contratos do core da aplicação."""

from .gateway import GatewayObserverProtocol, GatewayTransportProtocol, RequestTiming

__all__ = [
    "GatewayObserverProtocol",
    "GatewayTransportProtocol",
    "RequestTiming",
]
