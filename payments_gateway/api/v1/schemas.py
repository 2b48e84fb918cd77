"""Pydantic schemas for API responses"""

from pydantic import BaseModel
from typing import List, Optional

from payments_gateway.domain.models import Payment, PaymentStatistics, PaymentType, SortOrder
from payments_gateway.domain.formatting import PaymentFormatter


class PaymentSchema(BaseModel):
    """Single fee-applied payment"""

    id: str
    title: str
    amount: int
    timestamp: int
    type: PaymentType
    type_label: str
    category: str
    fee: int
    formatted_amount: str
    formatted_fee: str
    formatted_date: str

    @classmethod
    def from_domain(cls, payment: Payment, formatter: PaymentFormatter) -> "PaymentSchema":
        return cls(
            id=payment.id,
            title=payment.title,
            amount=payment.amount,
            timestamp=payment.timestamp,
            type=payment.type,
            type_label=formatter.label_for(payment.type),
            category=payment.category,
            fee=payment.fee,
            formatted_amount=formatter.format_amount(payment.amount),
            formatted_fee=formatter.format_amount(payment.fee),
            formatted_date=formatter.format_date(payment.timestamp),
        )


class StatisticsSchema(BaseModel):
    """Summary totals over the returned payments"""

    total_amount: int
    total_fee: int
    average_amount: int
    count: int
    formatted_total_amount: str
    formatted_total_fee: str
    formatted_average_amount: str
    fee_share: str

    @classmethod
    def from_domain(cls, statistics: PaymentStatistics, formatter: PaymentFormatter) -> "StatisticsSchema":
        return cls(
            total_amount=statistics.total_amount,
            total_fee=statistics.total_fee,
            average_amount=statistics.average_amount,
            count=statistics.count,
            formatted_total_amount=formatter.format_amount(statistics.total_amount),
            formatted_total_fee=formatter.format_amount(statistics.total_fee),
            formatted_average_amount=formatter.format_amount(statistics.average_amount),
            fee_share=formatter.format_percentage(statistics.total_fee, statistics.total_amount),
        )


class PaymentListResponse(BaseModel):
    """Response for GET /v1/payments"""

    filter_type: Optional[PaymentType] = None
    sort_order: SortOrder
    payments: List[PaymentSchema]
    statistics: StatisticsSchema
