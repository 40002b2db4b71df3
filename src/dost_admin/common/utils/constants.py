DEMO_ADMIN_EMAIL = "admin@dostapp.com"
DEMO_ADMIN_ID = "admin1"
DEMO_ADMIN_NAME = "Admin User"

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/400"
DEFAULT_IMAGE_BUCKET = "room-images"
MAX_ROOM_IMAGES = 5

TOAST_TIMEOUT_SECONDS = 4.0
HISTORY_LIMIT = 50

ALL_FILTER = "All"

ROOM_STATUSES = ["Available", "Booked", "Maintenance"]

ACTIVE_BOOKING_STATUSES = ("Pending", "Approved")

BOOKINGS_CSV_HEADER = [
    "ID",
    "Guest",
    "Room",
    "Check-in",
    "Check-out",
    "Amount",
    "Status",
    "Payment",
]
