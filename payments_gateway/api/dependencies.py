"""Dependency injection for FastAPI endpoints"""

from datetime import timedelta, timezone
from fastapi import Depends, Request

from payments_gateway.config import settings
from payments_gateway.domain.repository import PaymentRepository
from payments_gateway.domain.queries import GetPaymentsQuery
from payments_gateway.domain.formatting import PaymentFormatter
from payments_gateway.infrastructure.clients.payments_api import PaymentApiClient
from payments_gateway.infrastructure.repositories.in_memory import InMemoryPaymentRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_payment_repository() -> PaymentRepository:
    """Provide the configured record store"""
    if settings.payment_source == "http":
        return PaymentApiClient()
    return InMemoryPaymentRepository()


def get_payments_query(repository: PaymentRepository = Depends(get_payment_repository)) -> GetPaymentsQuery:
    """Provide the payment query bound to the configured record store"""
    return GetPaymentsQuery(repository)


def get_formatter() -> PaymentFormatter:
    """Provide display formatter in the configured timezone"""
    return PaymentFormatter(
        tz=timezone(timedelta(hours=settings.display_utc_offset_hours)),
        currency_suffix=settings.currency_suffix,
    )
