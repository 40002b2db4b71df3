import unittest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from dost_admin.common.repository.payment_repo import PaymentRepository, PAYMENT_SELECT
from dost_admin.common.models.payments import PaymentMethod, PaymentStatus


PAYMENT_ROW = {
    "id": "p1",
    "booking_id": "b1",
    "user_id": "u1",
    "room_id": "r1",
    "amount": 3000,
    "transaction_id": "TXN882211",
    "payment_status": "Paid",
    "payment_method": "Net Banking",
    "created_at": "2024-01-10",
}


class TestPaymentRepository(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.table = self.client.table.return_value
        self.repo = PaymentRepository(self.client)

    def test_get_payments(self):
        self.table.select.return_value.order.return_value.execute.return_value = MagicMock(
            data=[PAYMENT_ROW]
        )

        payments = self.repo.get_payments()

        self.table.select.assert_called_once_with(PAYMENT_SELECT)
        self.assertEqual(payments[0].payment_method, PaymentMethod.NET_BANKING)
        self.assertEqual(payments[0].payment_status, PaymentStatus.PAID)

    def test_get_payments_api_error(self):
        self.table.select.return_value.order.return_value.execute.side_effect = APIError(
            {"message": "down"}
        )

        with self.assertRaises(APIError):
            self.repo.get_payments()

    def test_get_payment_summaries(self):
        rows = [{"amount": 10, "payment_status": "Paid", "created_at": "2024-01-01"}]
        self.table.select.return_value.execute.return_value = MagicMock(data=rows)

        self.assertEqual(self.repo.get_payment_summaries(), rows)

    def test_refund_payment_only_matches_paid(self):
        chain = self.table.update.return_value.eq.return_value.eq.return_value
        chain.execute.return_value = MagicMock(
            data=[{**PAYMENT_ROW, "payment_status": "Refunded"}]
        )

        payment = self.repo.refund_payment("p1")

        self.table.update.assert_called_once_with({"payment_status": "Refunded"})
        self.table.update.return_value.eq.assert_called_once_with("id", "p1")
        self.table.update.return_value.eq.return_value.eq.assert_called_once_with(
            "payment_status", "Paid"
        )
        self.assertEqual(payment.payment_status, PaymentStatus.REFUNDED)

    def test_refund_payment_no_match_returns_none(self):
        chain = self.table.update.return_value.eq.return_value.eq.return_value
        chain.execute.return_value = MagicMock(data=[])

        self.assertIsNone(self.repo.refund_payment("p2"))


if __name__ == "__main__":
    unittest.main()
