"""Statistics aggregation over fee-applied payments"""

from typing import Sequence

from payments_gateway.domain.models import Payment, PaymentStatistics


def calculate_statistics(payments: Sequence[Payment]) -> PaymentStatistics:
    """
    Reduce payments to summary totals.

    - total_amount / total_fee: plain sums (0 for empty input)
    - average_amount: truncating integer mean, 0 for empty input
    - count: number of payments
    """
    total_amount = sum(p.amount for p in payments)
    total_fee = sum(p.fee for p in payments)
    count = len(payments)

    # Amounts are non-negative, so floor division truncates
    average_amount = total_amount // count if count > 0 else 0

    return PaymentStatistics(
        total_amount=total_amount,
        total_fee=total_fee,
        average_amount=average_amount,
        count=count,
    )
