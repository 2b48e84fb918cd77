"""Fee policy - per payment type fee rules"""

from typing import Callable, Dict, Mapping

from payments_gateway.domain.models import Payment, PaymentType
from payments_gateway.domain.exceptions import FeePolicyError

FeeRule = Callable[[Payment], int]

CARD_FEE_RATE = 0.03
GIFT_FEE_RATE = 0.05
BANK_FEE_FIXED = 500


def percentage_fee(rate: float) -> FeeRule:
    """Fee rule charging `rate` of the amount, truncated toward zero"""

    def rule(payment: Payment) -> int:
        return int(payment.amount * rate)

    return rule


def fixed_fee(fee: int) -> FeeRule:
    """Fee rule charging the same fee regardless of amount"""

    def rule(payment: Payment) -> int:
        return fee

    return rule


class FeePolicy:
    """
    Registry mapping each payment type to a fee rule.

    Supporting a new payment type means registering a rule for it with
    `with_rule`; callers of `compute_fee` never branch on the type.
    """

    def __init__(self, rules: Mapping[PaymentType, FeeRule]):
        self._rules: Dict[PaymentType, FeeRule] = dict(rules)

    def with_rule(self, payment_type: PaymentType, rule: FeeRule) -> "FeePolicy":
        """Return a new policy with `rule` registered for `payment_type`"""
        rules = dict(self._rules)
        rules[payment_type] = rule
        return FeePolicy(rules)

    def supports(self, payment_type: PaymentType) -> bool:
        return payment_type in self._rules

    def compute_fee(self, payment: Payment) -> int:
        """
        Compute the fee for a payment.

        Raises:
            FeePolicyError: No rule registered for the payment's type, or the
                rule produced a negative fee
        """
        rule = self._rules.get(payment.type)
        if rule is None:
            raise FeePolicyError(f"No fee rule registered for payment type {payment.type.value}")

        fee = rule(payment)
        if fee < 0:
            raise FeePolicyError(f"Fee rule for {payment.type.value} returned negative fee {fee}")
        return fee


DEFAULT_FEE_POLICY = FeePolicy(
    {
        PaymentType.CARD: percentage_fee(CARD_FEE_RATE),
        PaymentType.BANK: fixed_fee(BANK_FEE_FIXED),
        PaymentType.CASH: fixed_fee(0),
        PaymentType.GIFT: percentage_fee(GIFT_FEE_RATE),
    }
)
