from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from dost_admin.common.models.payments import PaymentStatus
from dost_admin.common.models.rooms import RoomStatus
from dost_admin.common.models.stats import DailyBookings, DashboardStats, MonthlyRevenue
from dost_admin.common.repository import fallback_data
from dost_admin.common.repository.booking_repo import BookingRepository
from dost_admin.common.repository.payment_repo import PaymentRepository
from dost_admin.common.repository.room_repo import RoomRepository
from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import ACTIVE_BOOKING_STATUSES
from dost_admin.common.utils.datetime_normaliser import from_iso_string, month_start
from dost_admin.common.utils.fallback import remote_read

REVENUE_MONTHS = 6
TREND_DAYS = 7


def _fallback_stats(self) -> DashboardStats:
    return fallback_data.dashboard_stats()


class StatsService:
    def __init__(
        self,
        room_repo: RoomRepository,
        booking_repo: BookingRepository,
        payment_repo: PaymentRepository,
        user_repo: UserRepository,
        settings: SupabaseSettings,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.room_repo = room_repo
        self.booking_repo = booking_repo
        self.payment_repo = payment_repo
        self.user_repo = user_repo
        self.settings = settings
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    @remote_read(_fallback_stats)
    def get_dashboard(self) -> DashboardStats:
        now = self.clock()
        payments = self.payment_repo.get_payment_summaries()
        bookings = self.booking_repo.get_booking_summaries()
        room_statuses = self.room_repo.get_room_statuses()

        paid = self._with_status(payments, PaymentStatus.PAID)
        this_month = month_start(now)

        return DashboardStats(
            total_revenue=self._sum_amounts(paid),
            monthly_revenue=self._sum_amounts(
                [p for p in paid if self._created(p) and self._created(p) >= this_month]
            ),
            active_bookings=len(
                [b for b in bookings if b.get("booking_status") in ACTIVE_BOOKING_STATUSES]
            ),
            pending_payments=self._sum_amounts(
                self._with_status(payments, PaymentStatus.PENDING)
            ),
            failed_payments_count=len(self._with_status(payments, PaymentStatus.FAILED)),
            available_rooms=len([s for s in room_statuses if s == RoomStatus.AVAILABLE]),
            total_rooms=len(room_statuses),
            total_users=self.user_repo.count_clients(),
            revenue_by_month=self._revenue_by_month(paid, now),
            booking_trends=self._booking_trends(bookings, now),
        )

    @staticmethod
    def _with_status(payments: List[dict], status: PaymentStatus) -> List[dict]:
        return [p for p in payments if p.get("payment_status") == status.value]

    @staticmethod
    def _sum_amounts(payments: List[dict]) -> float:
        return float(sum(float(p.get("amount") or 0) for p in payments))

    @staticmethod
    def _created(row: dict) -> Optional[datetime]:
        return from_iso_string(row.get("created_at") or "")

    def _revenue_by_month(self, paid: List[dict], now: datetime) -> List[MonthlyRevenue]:
        series = []
        for back in range(REVENUE_MONTHS - 1, -1, -1):
            year, month = now.year, now.month - back
            while month <= 0:
                month += 12
                year -= 1
            amount = self._sum_amounts(
                [
                    p
                    for p in paid
                    if self._created(p)
                    and (self._created(p).year, self._created(p).month) == (year, month)
                ]
            )
            label = datetime(year, month, 1).strftime("%b")
            series.append(MonthlyRevenue(month=label, amount=amount))
        return series

    def _booking_trends(self, bookings: List[dict], now: datetime) -> List[DailyBookings]:
        series = []
        for back in range(TREND_DAYS - 1, -1, -1):
            day = (now - timedelta(days=back)).date()
            count = len(
                [b for b in bookings if self._created(b) and self._created(b).date() == day]
            )
            series.append(DailyBookings(day=day.strftime("%a"), count=count))
        return series
