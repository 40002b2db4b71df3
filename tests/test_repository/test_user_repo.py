import unittest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.models.users import AuthUser, UserRole, UserStatus
from dost_admin.common.utils.custom_exceptions import NotFoundException


class TestUserRepository(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.table = self.client.table.return_value
        self.repo = UserRepository(self.client)

    def test_get_clients_filters_role(self):
        query = self.table.select.return_value.eq.return_value.order.return_value
        query.execute.return_value = MagicMock(
            data=[
                {
                    "id": "u1",
                    "email": "rahul@example.com",
                    "full_name": "Rahul Sharma",
                    "phone": "+91 9876543210",
                    "role": "client",
                    "status": "Blocked",
                    "created_at": "2023-01-15",
                    "total_bookings": 12,
                    "total_spent": 45000,
                }
            ]
        )

        users = self.repo.get_clients()

        self.table.select.return_value.eq.assert_called_once_with("role", "client")
        self.assertEqual(users[0].status, UserStatus.BLOCKED)
        self.assertEqual(users[0].role, UserRole.CLIENT)
        self.assertEqual(users[0].total_bookings, 12)

    def test_count_clients(self):
        self.table.select.return_value.eq.return_value.execute.return_value = MagicMock(
            data=[{"id": "u1"}, {"id": "u2"}, {"id": "u3"}]
        )

        self.assertEqual(self.repo.count_clients(), 3)

    def test_get_admin_by_mail_found(self):
        query = self.table.select.return_value.eq.return_value.eq.return_value.limit.return_value
        query.execute.return_value = MagicMock(
            data=[{"id": 7, "email": "boss@dostapp.com", "full_name": "Boss", "role": "admin"}]
        )

        user = self.repo.get_admin_by_mail("boss@dostapp.com")

        self.table.select.return_value.eq.assert_called_once_with("email", "boss@dostapp.com")
        self.table.select.return_value.eq.return_value.eq.assert_called_once_with("role", "admin")
        self.assertEqual(user, AuthUser(id="7", email="boss@dostapp.com", full_name="Boss", role=UserRole.ADMIN))

    def test_get_admin_by_mail_not_found(self):
        query = self.table.select.return_value.eq.return_value.eq.return_value.limit.return_value
        query.execute.return_value = MagicMock(data=[])

        self.assertIsNone(self.repo.get_admin_by_mail("nobody@dostapp.com"))

    def test_get_admin_by_mail_api_error(self):
        query = self.table.select.return_value.eq.return_value.eq.return_value.limit.return_value
        query.execute.side_effect = APIError({"message": "timeout"})

        with self.assertRaises(APIError):
            self.repo.get_admin_by_mail("boss@dostapp.com")

    def test_update_user_status_success(self):
        self.table.update.return_value.eq.return_value.execute.return_value = MagicMock(
            data=[{"id": "u1"}]
        )

        self.repo.update_user_status("u1", UserStatus.BLOCKED)

        self.table.update.assert_called_once_with({"status": "Blocked"})

    def test_update_user_status_not_found(self):
        self.table.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[])

        with self.assertRaises(NotFoundException):
            self.repo.update_user_status("missing", UserStatus.ACTIVE)

    def test_delete_user(self):
        self.repo.delete_user("u1")

        self.table.delete.return_value.eq.assert_called_once_with("id", "u1")


if __name__ == "__main__":
    unittest.main()
