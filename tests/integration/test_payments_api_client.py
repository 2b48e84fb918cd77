"""Integration tests for the payments API client against a mocked transport"""

import httpx
import pytest
from typing import Any, Callable, List

from payments_gateway.domain.models import PaymentType
from payments_gateway.domain.exceptions import InvalidPaymentDataError, PaymentAPIError
from payments_gateway.infrastructure.clients.payments_api import PaymentApiClient

BASE_URL = "http://payments.test"

WIRE_PAYMENTS = [
    {"id": "1", "title": "스타벅스", "amount": 5500, "timestamp": 1705190400000, "type": "CARD", "category": "카페"},
    {"id": "3", "title": "편의점", "amount": 3200, "timestamp": 1705017600000, "type": "CASH", "category": "생활"},
    {"id": "7", "title": "포인트 결제", "amount": 1200, "timestamp": 1704931200000, "type": "POINT", "category": "기타"},
]


def make_client(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> PaymentApiClient:
    kwargs.setdefault("backoff_base", 0)
    kwargs.setdefault("max_retries", 3)
    return PaymentApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.integration
async def test_fetch_all_parses_wire_records():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/payments"
        return httpx.Response(200, json=WIRE_PAYMENTS)

    payments = await make_client(handler).fetch_all()

    assert [p.id for p in payments] == ["1", "3", "7"]
    assert payments[0].type is PaymentType.CARD
    assert payments[1].type is PaymentType.CASH
    assert all(p.fee == 0 for p in payments)


@pytest.mark.integration
async def test_unknown_wire_type_uses_fallback():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=WIRE_PAYMENTS[2:])

    default_client = make_client(handler)
    cash_client = make_client(handler, type_fallback=PaymentType.CASH)

    assert (await default_client.fetch_all())[0].type is PaymentType.CARD
    assert (await cash_client.fetch_all())[0].type is PaymentType.CASH


@pytest.mark.integration
async def test_fetch_by_type_sends_type_param():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[WIRE_PAYMENTS[1]])

    payments = await make_client(handler).fetch_by_type(PaymentType.CASH)

    assert seen[0].url.params["type"] == "CASH"
    assert [p.id for p in payments] == ["3"]


@pytest.mark.integration
async def test_fetch_by_id():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/payments/1":
            return httpx.Response(200, json=WIRE_PAYMENTS[0])
        return httpx.Response(404, json={"detail": "not found"})

    client = make_client(handler)

    payment = await client.fetch_by_id("1")
    assert payment is not None
    assert payment.title == "스타벅스"
    assert await client.fetch_by_id("404") is None


@pytest.mark.integration
async def test_server_errors_are_retried_then_succeed():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] < 3:
            return httpx.Response(503)
        return httpx.Response(200, json=WIRE_PAYMENTS)

    payments = await make_client(handler).fetch_all()

    assert calls["count"] == 3
    assert len(payments) == 3


@pytest.mark.integration
async def test_server_errors_exhaust_retries():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(500)

    with pytest.raises(PaymentAPIError, match="500"):
        await make_client(handler, max_retries=2).fetch_all()
    assert calls["count"] == 2


@pytest.mark.integration
async def test_client_errors_are_not_retried():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(401)

    with pytest.raises(PaymentAPIError, match="401"):
        await make_client(handler).fetch_all()
    assert calls["count"] == 1


@pytest.mark.integration
async def test_timeout_raises_payment_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(PaymentAPIError, match="timeout"):
        await make_client(handler).fetch_all()


@pytest.mark.integration
async def test_connection_error_raises_payment_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PaymentAPIError, match="unreachable"):
        await make_client(handler).fetch_all()


@pytest.mark.integration
async def test_negative_amount_rejected_at_boundary():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[dict(WIRE_PAYMENTS[0], amount=-10)])

    with pytest.raises(InvalidPaymentDataError):
        await make_client(handler).fetch_all()


@pytest.mark.integration
async def test_malformed_record_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": "1", "title": "missing fields"}])

    with pytest.raises(InvalidPaymentDataError):
        await make_client(handler).fetch_all()


@pytest.mark.integration
async def test_non_json_body_raises_payment_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(PaymentAPIError, match="invalid JSON"):
        await make_client(handler).fetch_all()


@pytest.mark.integration
async def test_fetch_by_id_encodes_id_as_single_segment():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(404)

    client = make_client(handler)

    assert await client.fetch_by_id("a/../../admin?x=1") is None
    assert await client.fetch_by_id("..") is None

    assert seen[0].url.raw_path == b"/payments/a%2F..%2F..%2Fadmin%3Fx%3D1"
    assert seen[1].url.raw_path == b"/payments/%2E%2E"


def test_explicit_zero_timeout_is_kept():
    assert PaymentApiClient(base_url=BASE_URL, timeout=0).timeout == 0
