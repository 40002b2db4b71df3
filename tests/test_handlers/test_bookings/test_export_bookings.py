import importlib
import unittest


class ExportBookingsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        import dost_admin.handlers.bookings.export_bookings as mod
        cls.mod = importlib.reload(mod)

    def test_export_all(self):
        resp = self.mod.export_bookings({}, None)

        self.assertEqual(200, resp["statusCode"])
        self.assertIn("bookings_export.csv", resp["headers"]["Content-Disposition"])
        lines = resp["body"].splitlines()
        self.assertEqual(lines[0], "ID,Guest,Room,Check-in,Check-out,Amount,Status,Payment")
        self.assertEqual(len(lines), 4)

    def test_export_filtered(self):
        resp = self.mod.export_bookings({"queryStringParameters": {"payment": "Failed"}}, None)

        lines = resp["body"].splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[1].startswith("b3,Priya Patel,"))

    def test_invalid_filter(self):
        resp = self.mod.export_bookings({"queryStringParameters": {"status": "Lost"}}, None)

        self.assertEqual(400, resp["statusCode"])


if __name__ == "__main__":
    unittest.main()
