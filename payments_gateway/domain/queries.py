"""Payment query orchestration - sequences record store and pipeline stages"""

from typing import List, Optional

from payments_gateway.domain.models import Payment, PaymentType, SortOrder
from payments_gateway.domain.repository import PaymentRepository
from payments_gateway.domain.fees import DEFAULT_FEE_POLICY, FeePolicy
from payments_gateway.domain.pipeline import apply_fees, filter_payments, sort_payments


class GetPaymentsQuery:
    """
    Retrieve payments ready for display.

    Holds no state between calls; each call works on its own snapshot from the
    record store. Store failures propagate to the caller untouched.
    """

    def __init__(self, repository: PaymentRepository, fee_policy: FeePolicy = DEFAULT_FEE_POLICY):
        self.repository = repository
        self.fee_policy = fee_policy

    async def __call__(
        self,
        filter_type: Optional[PaymentType] = None,
        sort_order: SortOrder = SortOrder.DATE_DESC,
    ) -> List[Payment]:
        """
        Flow:
        1. Fetch from the record store (narrowed by type when given)
        2. Filter by type
        3. Sort
        4. Apply fees
        """
        if filter_type is None:
            payments = await self.repository.fetch_all()
        else:
            payments = await self.repository.fetch_by_type(filter_type)

        # Stores are not trusted to honour the type narrowing
        filtered = filter_payments(payments, filter_type)
        ordered = sort_payments(filtered, sort_order)
        return apply_fees(ordered, self.fee_policy)

    async def get_payment(self, payment_id: str) -> Optional[Payment]:
        """Fetch a single payment with its fee applied, or None if unknown"""
        payment = await self.repository.fetch_by_id(payment_id)
        if payment is None:
            return None
        return payment.with_fee(self.fee_policy.compute_fee(payment))
