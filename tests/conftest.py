"""Pytest fixtures for testing"""

import pytest
from datetime import timezone
from typing import List
from fastapi.testclient import TestClient

from payments_gateway.api.main import create_app
from payments_gateway.api.dependencies import get_formatter, get_payment_repository
from payments_gateway.domain.models import Payment, PaymentType
from payments_gateway.domain.formatting import PaymentFormatter
from payments_gateway.infrastructure.repositories.in_memory import InMemoryPaymentRepository, sample_payments

# 2024-01-15 00:00:00 UTC
NOW_MS = 1_705_276_800_000


@pytest.fixture
def fixture_payments() -> List[Payment]:
    """The six sample payments anchored at a fixed instant"""
    return sample_payments(now_ms=NOW_MS)


@pytest.fixture
def scenario_payments() -> List[Payment]:
    """Card, cash and gift payment used for fee and statistics checks"""
    return [
        Payment("c1", "Coffee", 5500, NOW_MS - 1000, PaymentType.CARD, "cafe"),
        Payment("c2", "Store", 3200, NOW_MS - 2000, PaymentType.CASH, "living"),
        Payment("c3", "Voucher", 50000, NOW_MS - 3000, PaymentType.GIFT, "etc"),
    ]


@pytest.fixture
def repository(fixture_payments: List[Payment]) -> InMemoryPaymentRepository:
    """In-memory record store with no simulated latency"""
    return InMemoryPaymentRepository(fixture_payments, delay_seconds=0, lookup_delay_seconds=0)


@pytest.fixture
def formatter() -> PaymentFormatter:
    return PaymentFormatter(tz=timezone.utc)


@pytest.fixture
def client(repository: InMemoryPaymentRepository, formatter: PaymentFormatter) -> TestClient:
    """Create FastAPI test client backed by the in-memory record store"""
    app = create_app()
    app.dependency_overrides[get_payment_repository] = lambda: repository
    app.dependency_overrides[get_formatter] = lambda: formatter
    return TestClient(app)
