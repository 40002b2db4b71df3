from typing import List

from dost_admin.common.models.payments import Payment, PaymentStatus
from dost_admin.common.models.results import ErrorKind, Result
from dost_admin.common.repository import fallback_data
from dost_admin.common.repository.payment_repo import PaymentRepository
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.datetime_normaliser import most_recent_first
from dost_admin.common.utils.fallback import remote_read, remote_write


def _fallback_payments(self) -> List[Payment]:
    return most_recent_first(fallback_data.payments())


class PaymentService:
    def __init__(self, payment_repo: PaymentRepository, settings: SupabaseSettings):
        self.payment_repo = payment_repo
        self.settings = settings

    @remote_read(_fallback_payments)
    def get_all_payments(self) -> List[Payment]:
        return self.payment_repo.get_payments()

    @remote_write
    def refund_payment(self, payment_id: str) -> Result:
        payment = self.payment_repo.refund_payment(payment_id)
        if payment is None:
            return Result.failure(
                f"Payment '{payment_id}' is not a paid payment and cannot be refunded",
                ErrorKind.INVALID_STATE,
            )
        return Result(data=payment)

    @staticmethod
    def can_refund(payment: Payment) -> bool:
        return payment.payment_status == PaymentStatus.PAID
