"""Testes de montagem do envelope assinado."""

from __future__ import annotations

from datetime import UTC, datetime
from urllib.parse import parse_qs, urlsplit

from api.connectors.allinpay.request_builder import (
    build_gateway_url,
    build_request_envelope,
    encode_query,
    gateway_timestamp,
)
from app.infra.crypto import verify_payload

FIXED_NOW = datetime(2026, 10, 19, 2, 30, 5, tzinfo=UTC)


def _fixed_now() -> datetime:
    return FIXED_NOW


def test_gateway_timestamp_uses_gateway_timezone() -> None:
    assert gateway_timestamp("Asia/Shanghai", _fixed_now) == "2026-10-19 10:30:05"


def test_gateway_timestamp_default_clock_format() -> None:
    value = gateway_timestamp()
    assert len(value) == 19
    datetime.strptime(value, "%Y-%m-%d %H:%M:%S")


def test_build_request_envelope_scenario(merchant_keys) -> None:
    envelope = build_request_envelope(
        sys_id="1902271423530473681",
        service="pay",
        method="query",
        param={"orderId": "A1"},
        private_key=merchant_keys.private_key,
        now=_fixed_now,
    )

    assert envelope.req == '{"service":"pay","method":"query","param":{"orderId":"A1"}}'
    assert envelope.v == "2.0"
    assert envelope.timestamp == "2026-10-19 10:30:05"
    assert envelope.signing_input == f"1902271423530473681{envelope.req}{envelope.timestamp}"
    assert verify_payload(envelope.signing_input, envelope.sign, merchant_keys.public_key)


def test_envelope_params_order(merchant_keys) -> None:
    envelope = build_request_envelope(
        sys_id="sys",
        service="pay",
        method="query",
        param={},
        private_key=merchant_keys.private_key,
    )
    assert list(envelope.as_params()) == ["sysid", "v", "timestamp", "sign", "req"]


def test_each_envelope_gets_fresh_timestamp(merchant_keys) -> None:
    instants = iter(
        [
            datetime(2026, 10, 19, 2, 30, 5, tzinfo=UTC),
            datetime(2026, 10, 19, 2, 30, 6, tzinfo=UTC),
        ]
    )

    first = build_request_envelope(
        sys_id="sys", service="s", method="m", param={},
        private_key=merchant_keys.private_key, now=lambda: next(instants),
    )
    second = build_request_envelope(
        sys_id="sys", service="s", method="m", param={},
        private_key=merchant_keys.private_key, now=lambda: next(instants),
    )

    assert first.timestamp != second.timestamp
    assert first.sign != second.sign


def test_build_gateway_url_query_contains_envelope(merchant_keys) -> None:
    envelope = build_request_envelope(
        sys_id="sys",
        service="pay",
        method="query",
        param={"orderId": "A1", "memo": "a b"},
        private_key=merchant_keys.private_key,
        now=_fixed_now,
    )

    url = build_gateway_url("https://gw.example.com/", "/gateway", envelope)
    parts = urlsplit(url)
    query = parse_qs(parts.query)

    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://gw.example.com/gateway"
    assert query["sysid"] == ["sys"]
    assert query["v"] == ["2.0"]
    assert query["timestamp"] == ["2026-10-19 10:30:05"]
    assert query["sign"] == [envelope.sign]
    assert query["req"] == [envelope.req]


def test_encode_query_matches_node_querystring_escaping() -> None:
    assert encode_query({"a": "x y", "b": "1+1=2", "c": "(ok)!"}) == "a=x%20y&b=1%2B1%3D2&c=(ok)!"
