"""Presentation formatting for amounts, dates and payment types"""

from datetime import datetime, timedelta, timezone, tzinfo

from payments_gateway.domain.models import PaymentType

UNKNOWN_DATE = "-"


class PaymentFormatter:
    """Turns raw payment values into display strings"""

    def __init__(self, tz: tzinfo | None = None, currency_suffix: str = "원"):
        self.tz = tz or timezone(timedelta(hours=9))
        self.currency_suffix = currency_suffix

    def format_amount(self, amount: int) -> str:
        """12345 -> '12,345원'"""
        return f"{amount:,}{self.currency_suffix}"

    def format_date(self, timestamp: int) -> str:
        """
        Epoch milliseconds -> 'MM월 dd일 HH:mm' in the formatter's timezone.

        Timestamps outside the representable datetime range render as
        UNKNOWN_DATE rather than failing the whole response.
        """
        try:
            moment = datetime.fromtimestamp(timestamp / 1000, tz=self.tz)
        except (ValueError, OverflowError, OSError):
            return UNKNOWN_DATE
        return moment.strftime("%m월 %d일 %H:%M")

    def format_percentage(self, part: int, whole: int) -> str:
        if whole == 0:
            return "0%"
        return f"{part / whole * 100:.1f}%"

    def label_for(self, payment_type: PaymentType) -> str:
        return payment_type.label
