"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, replace
from enum import Enum

from payments_gateway.domain.exceptions import InvalidPaymentDataError


class PaymentType(str, Enum):
    """Closed set of payment methods"""

    CARD = "CARD"
    BANK = "BANK"
    CASH = "CASH"
    GIFT = "GIFT"

    @property
    def label(self) -> str:
        return _PAYMENT_TYPE_LABELS[self]

    @classmethod
    def from_string(cls, value: str, default: "PaymentType | None" = None) -> "PaymentType":
        """
        Resolve a wire type string to a member.

        Matching is exact on the member name. Anything unrecognised resolves to
        `default` (CARD when not given) instead of failing the whole query.
        """
        try:
            return cls[value]
        except KeyError:
            return default if default is not None else cls.CARD


_PAYMENT_TYPE_LABELS = {
    PaymentType.CARD: "카드",
    PaymentType.BANK: "계좌이체",
    PaymentType.CASH: "현금",
    PaymentType.GIFT: "상품권",
}


class SortOrder(str, Enum):
    """Ordering keys supported by the sort stage"""

    DATE_DESC = "DATE_DESC"
    DATE_ASC = "DATE_ASC"
    AMOUNT_DESC = "AMOUNT_DESC"
    AMOUNT_ASC = "AMOUNT_ASC"


@dataclass(frozen=True)
class Payment:
    """Single monetary transaction supplied by a record store"""

    id: str
    title: str
    amount: int
    timestamp: int  # epoch milliseconds
    type: PaymentType
    category: str
    fee: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise InvalidPaymentDataError(f"Payment {self.id} has negative amount: {self.amount}")
        if self.fee < 0:
            raise InvalidPaymentDataError(f"Payment {self.id} has negative fee: {self.fee}")

    def with_fee(self, fee: int) -> "Payment":
        """Copy of this payment carrying `fee`, all other fields unchanged"""
        return replace(self, fee=fee)


@dataclass(frozen=True)
class PaymentStatistics:
    """Summary totals over a collection of fee-applied payments"""

    total_amount: int
    total_fee: int
    average_amount: int
    count: int
