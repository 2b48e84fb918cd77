"""Pipeline stages - pure transformations over payment collections"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from payments_gateway.domain.models import Payment, PaymentType, SortOrder
from payments_gateway.domain.fees import DEFAULT_FEE_POLICY, FeePolicy

# (sort key, descending)
_SORT_KEYS: Dict[SortOrder, Tuple[Callable[[Payment], int], bool]] = {
    SortOrder.DATE_DESC: (lambda p: p.timestamp, True),
    SortOrder.DATE_ASC: (lambda p: p.timestamp, False),
    SortOrder.AMOUNT_DESC: (lambda p: p.amount, True),
    SortOrder.AMOUNT_ASC: (lambda p: p.amount, False),
}


def filter_payments(payments: Iterable[Payment], payment_type: Optional[PaymentType]) -> List[Payment]:
    """
    Narrow payments to a single type.

    No type means passthrough. Relative order is preserved either way and the
    result is always a new list.
    """
    if payment_type is None:
        return list(payments)
    return [p for p in payments if p.type == payment_type]


def sort_payments(payments: Iterable[Payment], sort_order: SortOrder = SortOrder.DATE_DESC) -> List[Payment]:
    """
    Order payments by date or amount.

    Stable in every mode: payments with equal keys keep their input order
    (sorted() keeps equal elements in place even with reverse=True).
    """
    key, descending = _SORT_KEYS[sort_order]
    return sorted(payments, key=key, reverse=descending)


def apply_fees(payments: Iterable[Payment], fee_policy: FeePolicy = DEFAULT_FEE_POLICY) -> List[Payment]:
    """Return copies of payments carrying the fee computed by `fee_policy`"""
    return [p.with_fee(fee_policy.compute_fee(p)) for p in payments]
