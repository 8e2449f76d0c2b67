"""Testes do bootstrap (validação de settings e wiring do cliente)."""

from __future__ import annotations

import pytest

from api.connectors.allinpay import AllinPayClient, AllinPayHttpClient, LoggingGatewayObserver
from app.bootstrap import create_allinpay_client, validate_runtime_settings
from config.settings import get_allinpay_settings, get_base_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_allinpay_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_allinpay_settings.cache_clear()
    get_base_settings.cache_clear()


@pytest.fixture
def configured_env(monkeypatch, merchant_keys, allinpay_keys):
    monkeypatch.setenv("ALLINPAY_ENDPOINT", "https://gw.example.com")
    monkeypatch.setenv("ALLINPAY_SYS_ID", "1902271423530473681")
    monkeypatch.setenv("ALLINPAY_PRIVATE_KEY", merchant_keys.private_pem.replace("\n", "\\n"))
    monkeypatch.setenv("ALLINPAY_PUBLIC_KEY", allinpay_keys.public_pem)
    monkeypatch.delenv("ALLINPAY_BANK_PRIVATE_KEY", raising=False)


def test_validate_runtime_settings_ok(configured_env) -> None:
    assert validate_runtime_settings() == []


def test_validate_runtime_settings_lenient_in_development(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("ALLINPAY_ENDPOINT", raising=False)

    errors = validate_runtime_settings()

    assert "allinpay: ALLINPAY_ENDPOINT não configurado" in errors


def test_validate_runtime_settings_strict_in_production(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("ALLINPAY_ENDPOINT", raising=False)

    with pytest.raises(RuntimeError, match="Configuração inválida"):
        validate_runtime_settings()


@pytest.mark.asyncio
async def test_create_allinpay_client_wires_transport_and_observer(configured_env) -> None:
    client = create_allinpay_client()

    assert isinstance(client, AllinPayClient)
    assert isinstance(client._transport, AllinPayHttpClient)
    assert isinstance(client._observer, LoggingGatewayObserver)
    assert client.credentials.bank_private_key is None
    await client.aclose()
