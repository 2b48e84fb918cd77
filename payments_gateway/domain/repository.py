"""Record store contract consumed by the query pipeline"""

from abc import ABC, abstractmethod
from typing import List, Optional

from payments_gateway.domain.models import Payment, PaymentType


class PaymentRepository(ABC):
    """
    Source of payment snapshots.

    Every call may suspend on I/O and may fail with PaymentAPIError.
    Returned lists carry no ordering guarantee.
    """

    @abstractmethod
    async def fetch_all(self) -> List[Payment]:
        """Fetch every payment"""
        pass

    @abstractmethod
    async def fetch_by_type(self, payment_type: PaymentType) -> List[Payment]:
        """Fetch payments of a single type"""
        pass

    @abstractmethod
    async def fetch_by_id(self, payment_id: str) -> Optional[Payment]:
        """Fetch one payment, or None when the id is unknown"""
        pass
