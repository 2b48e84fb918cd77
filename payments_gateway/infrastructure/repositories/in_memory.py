"""In-memory record store backed by fixture data, with simulated latency"""

import asyncio
import time
from typing import List, Optional, Sequence

from payments_gateway.config import settings
from payments_gateway.domain.models import Payment, PaymentType
from payments_gateway.domain.repository import PaymentRepository

DAY_MS = 86_400_000


def sample_payments(now_ms: int | None = None) -> List[Payment]:
    """Six sample payments, one to six days before `now_ms`"""
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    return [
        Payment("1", "스타벅스", 5500, now_ms - 1 * DAY_MS, PaymentType.CARD, "카페"),
        Payment("2", "CGV 영화", 15000, now_ms - 2 * DAY_MS, PaymentType.CARD, "문화"),
        Payment("3", "편의점", 3200, now_ms - 3 * DAY_MS, PaymentType.CASH, "생활"),
        Payment("4", "상품권 사용", 50000, now_ms - 4 * DAY_MS, PaymentType.GIFT, "기타"),
        Payment("5", "배달의민족", 28000, now_ms - 5 * DAY_MS, PaymentType.CARD, "식비"),
        Payment("6", "계좌이체", 100000, now_ms - 6 * DAY_MS, PaymentType.BANK, "송금"),
    ]


class InMemoryPaymentRepository(PaymentRepository):
    """Record store serving a fixed snapshot"""

    def __init__(
        self,
        payments: Sequence[Payment] | None = None,
        delay_seconds: float | None = None,
        lookup_delay_seconds: float | None = None,
    ):
        self._payments = tuple(payments) if payments is not None else tuple(sample_payments())
        self.delay_seconds = delay_seconds if delay_seconds is not None else settings.fixture_delay_seconds
        self.lookup_delay_seconds = (
            lookup_delay_seconds if lookup_delay_seconds is not None else settings.fixture_lookup_delay_seconds
        )

    async def fetch_all(self) -> List[Payment]:
        await asyncio.sleep(self.delay_seconds)
        return list(self._payments)

    async def fetch_by_type(self, payment_type: PaymentType) -> List[Payment]:
        await asyncio.sleep(self.delay_seconds)
        return [p for p in self._payments if p.type == payment_type]

    async def fetch_by_id(self, payment_id: str) -> Optional[Payment]:
        await asyncio.sleep(self.lookup_delay_seconds)
        return next((p for p in self._payments if p.id == payment_id), None)
