"""GET /v1/payments - payment list with statistics, and single payment lookup"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from payments_gateway.api.v1.schemas import PaymentListResponse, PaymentSchema, StatisticsSchema
from payments_gateway.api.dependencies import get_formatter, get_payments_query, get_request_id
from payments_gateway.domain.models import PaymentType, SortOrder
from payments_gateway.domain.queries import GetPaymentsQuery
from payments_gateway.domain.statistics import calculate_statistics
from payments_gateway.domain.formatting import PaymentFormatter
from payments_gateway.domain.exceptions import InvalidPaymentDataError, PaymentAPIError
from payments_gateway.infrastructure.observability.metrics import record_query, store_fetch_failures_counter
from payments_gateway.infrastructure.observability.logging import log_query

router = APIRouter()


@router.get("/payments", response_model=PaymentListResponse)
async def list_payments(
    request: Request,
    payment_type: Optional[PaymentType] = Query(None, alias="type", description="Only payments of this type"),
    sort_order: SortOrder = Query(SortOrder.DATE_DESC, alias="sort", description="Result ordering"),
    query: GetPaymentsQuery = Depends(get_payments_query),
    formatter: PaymentFormatter = Depends(get_formatter),
):
    """
    List fee-applied payments with summary statistics.

    Flow:
    1. Fetch, filter, sort and apply fees via the payment query
    2. Aggregate statistics over the result
    3. Format for display
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        payments = await query(filter_type=payment_type, sort_order=sort_order)

    except PaymentAPIError as e:
        store_fetch_failures_counter.inc()
        logging.error(f"Payments API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payment service unavailable")

    except InvalidPaymentDataError as e:
        store_fetch_failures_counter.inc()
        logging.error(f"Invalid payment data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail="Payment service returned invalid data")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    statistics = calculate_statistics(payments)

    filter_label = payment_type.value if payment_type else None
    duration_ms = (time.time() - start_time) * 1000
    record_query(filter_label, statistics.count)
    log_query(request_id, filter_label, sort_order.value, statistics.count, duration_ms)

    return PaymentListResponse(
        filter_type=payment_type,
        sort_order=sort_order,
        payments=[PaymentSchema.from_domain(p, formatter) for p in payments],
        statistics=StatisticsSchema.from_domain(statistics, formatter),
    )


@router.get("/payments/{payment_id}", response_model=PaymentSchema)
async def get_payment(
    payment_id: str,
    request: Request,
    query: GetPaymentsQuery = Depends(get_payments_query),
    formatter: PaymentFormatter = Depends(get_formatter),
):
    """Retrieve a single payment with its fee applied"""
    request_id = get_request_id(request)

    try:
        payment = await query.get_payment(payment_id)
    except PaymentAPIError as e:
        store_fetch_failures_counter.inc()
        logging.error(f"Payments API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payment service unavailable")
    except InvalidPaymentDataError as e:
        store_fetch_failures_counter.inc()
        logging.error(f"Invalid payment data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail="Payment service returned invalid data")
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if payment is None:
        raise HTTPException(status_code=404, detail="Payment not found")

    return PaymentSchema.from_domain(payment, formatter)
