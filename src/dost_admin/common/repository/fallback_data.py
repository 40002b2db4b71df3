"""Static records served while the dashboard runs without Supabase.

Every accessor builds fresh model instances, so callers may mutate what they
get back without affecting later reads.
"""
from typing import List, Optional

from dost_admin.common.models.bookings import Booking
from dost_admin.common.models.payments import Payment
from dost_admin.common.models.rooms import Room, RoomStatus
from dost_admin.common.models.stats import DailyBookings, DashboardStats, MonthlyRevenue
from dost_admin.common.models.users import User

USER_ROWS = [
    {"id": "u1", "full_name": "Rahul Sharma", "email": "rahul@example.com", "phone": "+91 9876543210", "role": "client", "status": "Active", "created_at": "2023-01-15", "total_bookings": 12, "total_spent": 45000},
    {"id": "u2", "full_name": "Anjali Gupta", "email": "anjali@example.com", "phone": "+91 9123456789", "role": "client", "status": "Active", "created_at": "2023-03-20", "total_bookings": 5, "total_spent": 18500},
    {"id": "u3", "full_name": "Vikram Singh", "email": "vikram@example.com", "phone": "+91 8888877777", "role": "client", "status": "Blocked", "created_at": "2023-06-10", "total_bookings": 2, "total_spent": 3200},
    {"id": "u4", "full_name": "Priya Patel", "email": "priya@example.com", "phone": "+91 7777766666", "role": "client", "status": "Active", "created_at": "2023-08-05", "total_bookings": 8, "total_spent": 22000},
]

ROOM_ROWS = [
    {"id": "r1", "roomname": "Superior Room 101", "roomtype": "Single", "price": 1500, "capacity": 1, "status": "Available", "amenities": ["WiFi", "AC", "TV"], "images": ["https://images.unsplash.com/photo-1631049307264-da0ec9d70304"]},
    {"id": "r2", "roomname": "Luxury Suite 202", "roomtype": "Suite", "price": 4500, "capacity": 2, "status": "Booked", "amenities": ["WiFi", "AC", "TV", "Mini Bar"], "images": ["https://images.unsplash.com/photo-1590490360182-c33d57733427"]},
    {"id": "r3", "roomname": "Deluxe King 305", "roomtype": "Deluxe", "price": 3200, "capacity": 3, "status": "Available", "amenities": ["WiFi", "AC"], "images": ["https://images.unsplash.com/photo-1566665797739-1674de7a421a"]},
]

BOOKING_ROWS = [
    {"id": "b1", "user_id": "u1", "room_id": "r1", "check_in": "2023-11-20", "check_out": "2023-11-22", "total_price": 3000, "booking_status": "Approved", "payment_status": "Paid", "created_at": "2023-11-15"},
    {"id": "b2", "user_id": "u2", "room_id": "r2", "check_in": "2023-11-21", "check_out": "2023-11-25", "total_price": 18000, "booking_status": "Pending", "payment_status": "Pending", "created_at": "2023-11-16"},
    {"id": "b3", "user_id": "u4", "room_id": "r3", "check_in": "2023-12-01", "check_out": "2023-12-05", "total_price": 12800, "booking_status": "Cancelled", "payment_status": "Failed", "created_at": "2023-11-18"},
]

PAYMENT_ROWS = [
    {"id": "p1", "booking_id": "b1", "user_id": "u1", "room_id": "r1", "amount": 3000, "transaction_id": "TXN882211", "payment_status": "Paid", "payment_method": "Card", "created_at": "2023-11-15"},
    {"id": "p2", "booking_id": "b2", "user_id": "u2", "room_id": "r2", "amount": 18000, "transaction_id": "TXN993344", "payment_status": "Pending", "payment_method": "UPI", "created_at": "2023-11-16"},
    {"id": "p3", "booking_id": "b3", "user_id": "u4", "room_id": "r3", "amount": 12800, "transaction_id": "TXN112233", "payment_status": "Failed", "payment_method": "UPI", "created_at": "2023-11-18"},
]


def _find(rows: List[dict], row_id: str) -> Optional[dict]:
    return next((row for row in rows if row["id"] == row_id), None)


def _joined(row: dict) -> dict:
    return {
        **row,
        "user": _find(USER_ROWS, row["user_id"]),
        "room": _find(ROOM_ROWS, row["room_id"]),
    }


def users() -> List[User]:
    return [User.from_row(row) for row in USER_ROWS]


def rooms() -> List[Room]:
    return [Room.from_row(row) for row in ROOM_ROWS]


def available_rooms_count() -> int:
    return len([room for room in rooms() if room.status == RoomStatus.AVAILABLE])


def bookings() -> List[Booking]:
    return [Booking.from_row(_joined(row)) for row in BOOKING_ROWS]


def payments() -> List[Payment]:
    return [Payment.from_row(_joined(row)) for row in PAYMENT_ROWS]


def dashboard_stats() -> DashboardStats:
    return DashboardStats(
        total_revenue=845200,
        monthly_revenue=124500,
        active_bookings=128,
        pending_payments=45000,
        failed_payments_count=5,
        available_rooms=12,
        total_rooms=45,
        total_users=450,
        revenue_by_month=[
            MonthlyRevenue("Jul", 45000),
            MonthlyRevenue("Aug", 32000),
            MonthlyRevenue("Sep", 28000),
            MonthlyRevenue("Oct", 55000),
            MonthlyRevenue("Nov", 72000),
            MonthlyRevenue("Dec", 84000),
        ],
        booking_trends=[
            DailyBookings("Mon", 12),
            DailyBookings("Tue", 19),
            DailyBookings("Wed", 15),
            DailyBookings("Thu", 22),
            DailyBookings("Fri", 30),
            DailyBookings("Sat", 35),
            DailyBookings("Sun", 28),
        ],
    )
