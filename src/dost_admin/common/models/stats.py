from dataclasses import dataclass, field
from typing import List


@dataclass
class MonthlyRevenue:
    month: str
    amount: float


@dataclass
class DailyBookings:
    day: str
    count: int


@dataclass
class DashboardStats:
    total_revenue: float
    monthly_revenue: float
    active_bookings: int
    pending_payments: float
    failed_payments_count: int
    available_rooms: int
    total_rooms: int
    total_users: int
    revenue_by_month: List[MonthlyRevenue] = field(default_factory=list)
    booking_trends: List[DailyBookings] = field(default_factory=list)
