"""Payments API HTTP client - remote record store"""

import asyncio
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field, ValidationError

from payments_gateway.config import settings
from payments_gateway.domain.models import Payment, PaymentType
from payments_gateway.domain.repository import PaymentRepository
from payments_gateway.domain.exceptions import InvalidPaymentDataError, PaymentAPIError
from payments_gateway.infrastructure.observability.metrics import (
    upstream_latency_histogram,
    upstream_retry_counter,
)

logger = logging.getLogger(__name__)


def encode_path_segment(value: str) -> str:
    """Percent-encode a free-text id so it stays a single URL path segment"""
    encoded = quote(value, safe="")
    # Bare dot segments would be collapsed by URL normalisation
    if encoded in (".", ".."):
        encoded = encoded.replace(".", "%2E")
    return encoded


class PaymentRecord(BaseModel):
    """Payment as transmitted by the payments API (no fee on the wire)"""

    id: str
    title: str
    amount: int = Field(..., ge=0)
    timestamp: int
    type: str
    category: str

    def to_domain(self, fallback: PaymentType) -> Payment:
        payment_type = PaymentType.from_string(self.type, default=fallback)
        if payment_type.value != self.type:
            logger.warning(
                "Unknown payment type, using fallback",
                extra={"payment_id": self.id, "wire_type": self.type, "fallback": fallback.value},
            )

        return Payment(
            id=self.id,
            title=self.title,
            amount=self.amount,
            timestamp=self.timestamp,
            type=payment_type,
            category=self.category,
        )


class PaymentApiClient(PaymentRepository):
    """Client for the external payments API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        type_fallback: PaymentType | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.payments_api_base
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.payments_api_max_retries
        self.backoff_base = backoff_base if backoff_base is not None else settings.payments_api_backoff_base
        self.type_fallback = type_fallback or settings.unknown_payment_type_fallback
        self.transport = transport

    async def fetch_all(self) -> List[Payment]:
        data = await self._get("/payments")
        return self._parse_list(data)

    async def fetch_by_type(self, payment_type: PaymentType) -> List[Payment]:
        data = await self._get("/payments", params={"type": payment_type.value})
        return self._parse_list(data)

    async def fetch_by_id(self, payment_id: str) -> Optional[Payment]:
        data = await self._get(f"/payments/{encode_path_segment(payment_id)}", allow_not_found=True)
        if data is None:
            return None
        return self._parse_record(data)

    async def _get(
        self,
        path: str,
        params: Dict[str, str] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """
        GET a JSON document from the payments API.

        Retry strategy:
        - Exponential backoff: base, 2*base, 4*base, ... (base * 2^(attempt-1))
        - Retries on 5xx errors and network failures, never on 4xx

        Raises:
            PaymentAPIError: On timeout, HTTP errors, or non-JSON response after retries
        """
        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with upstream_latency_histogram.time():
                        response = await client.get(f"{self.base_url}{path}", params=params)

                    if allow_not_found and response.status_code == 404:
                        return None
                    response.raise_for_status()
                    return response.json()

                except httpx.HTTPStatusError as e:
                    if e.response.status_code < 500:
                        raise PaymentAPIError(f"Payments API error: {e.response.status_code}") from e
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise PaymentAPIError(f"Payments API error: {e.response.status_code}") from e

                except httpx.TimeoutException as e:
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise PaymentAPIError(f"Payments API timeout after {self.timeout}s") from e

                except httpx.RequestError as e:
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise PaymentAPIError(f"Payments API unreachable: {e}") from e

                except ValueError as e:
                    raise PaymentAPIError(f"Payments API returned invalid JSON: {e}") from e

                upstream_retry_counter.inc()
                backoff = self.backoff_base * (2 ** (attempt - 1))
                logger.warning(
                    "Retrying payments API call",
                    extra={"path": path, "attempt": attempt, "backoff_seconds": backoff},
                )
                await asyncio.sleep(backoff)

    def _parse_list(self, data: Any) -> List[Payment]:
        if not isinstance(data, list):
            raise InvalidPaymentDataError(f"Expected a list of payments, got {type(data).__name__}")
        return [self._parse_record(item) for item in data]

    def _parse_record(self, data: Any) -> Payment:
        try:
            record = PaymentRecord.model_validate(data)
        except ValidationError as e:
            raise InvalidPaymentDataError(f"Invalid payment data from payments API: {e}") from e
        return record.to_domain(self.type_fallback)
