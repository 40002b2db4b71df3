from postgrest.exceptions import APIError
import logging
from typing import List, Optional
from dost_admin.common.models.payments import Payment, PaymentStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from supabase import Client
else:
    Client = object

logger = logging.getLogger(__name__)

TABLE_NAME = "payments"
PAYMENT_SELECT = "*, user:users(*), room:rooms(*)"


class PaymentRepository:
    def __init__(self, client: Optional[Client]):
        self.client = client

    def get_payments(self) -> List[Payment]:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select(PAYMENT_SELECT)
                .order("created_at", desc=True)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving payments: {err.message}")
            raise
        return [Payment.from_row(row) for row in response.data or []]

    def get_payment_summaries(self) -> List[dict]:
        """amount, payment_status and created_at of every payment."""
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("amount, payment_status, created_at")
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving payment summaries: {err.message}")
            raise
        return response.data or []

    def refund_payment(self, payment_id: str) -> Optional[Payment]:
        """Mark a Paid payment Refunded. None when no Paid payment matched."""
        try:
            response = (
                self.client.table(TABLE_NAME)
                .update({"payment_status": PaymentStatus.REFUNDED.value})
                .eq("id", payment_id)
                .eq("payment_status", PaymentStatus.PAID.value)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error refunding payment {payment_id}: {err.message}")
            raise
        if not response.data:
            return None
        return Payment.from_row(response.data[0])
