import logging
from dataclasses import asdict

from dost_admin.common.models.stats import DashboardStats
from dost_admin.common.repository.booking_repo import BookingRepository
from dost_admin.common.repository.payment_repo import PaymentRepository
from dost_admin.common.repository.room_repo import RoomRepository
from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.services.booking_service import BookingService
from dost_admin.common.services.stats_service import StatsService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

RECENT_BOOKINGS_LIMIT = 10

settings = SupabaseSettings.from_env()
client = client_or_none(settings)
booking_repo = BookingRepository(client)
stats_service = StatsService(
    room_repo=RoomRepository(client),
    booking_repo=booking_repo,
    payment_repo=PaymentRepository(client),
    user_repo=UserRepository(client),
    settings=settings,
)
booking_service = BookingService(booking_repo=booking_repo, settings=settings)


def stats_payload(stats: DashboardStats) -> dict:
    return {
        "totalRevenue": stats.total_revenue,
        "monthlyRevenue": stats.monthly_revenue,
        "activeBookings": stats.active_bookings,
        "pendingPayments": stats.pending_payments,
        "failedPaymentsCount": stats.failed_payments_count,
        "availableRooms": stats.available_rooms,
        "totalRooms": stats.total_rooms,
        "totalUsers": stats.total_users,
        "revenueByMonth": [asdict(m) for m in stats.revenue_by_month],
        "bookingTrends": [asdict(d) for d in stats.booking_trends],
    }


def get_dashboard(event, context):
    try:
        stats = stats_service.get_dashboard()
        recent = booking_service.get_recent_bookings(RECENT_BOOKINGS_LIMIT)
        return send_custom_response(
            200,
            "Dashboard retrieved successfully",
            {
                "stats": stats_payload(stats),
                "recent_bookings": [asdict(b) for b in recent],
            },
        )
    except Exception:
        logger.exception("Unhandled error building dashboard")
        return send_custom_response(500, "Internal server error")
