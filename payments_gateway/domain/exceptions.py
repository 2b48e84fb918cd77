"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PaymentAPIError(DomainException):
    """Payment record store returned an error or is unavailable"""

    pass


class InvalidPaymentDataError(DomainException):
    """Payment data is malformed or violates an invariant (e.g. negative amount)"""

    pass


class FeePolicyError(DomainException):
    """Fee policy has no rule for a payment type or a rule produced a negative fee"""

    pass
