import logging
from dataclasses import asdict

from dost_admin.common.models.bookings import BookingPaymentStatus, BookingStatus
from dost_admin.common.repository.booking_repo import BookingRepository
from dost_admin.common.services.booking_service import BookingService
from dost_admin.common.services.filters import filter_bookings
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import ALL_FILTER
from dost_admin.common.utils.custom_response import send_custom_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
booking_repo = BookingRepository(client_or_none(settings))
booking_service = BookingService(booking_repo=booking_repo, settings=settings)

BOOKING_STATUSES = [s.value for s in BookingStatus]
PAYMENT_STATUSES = [s.value for s in BookingPaymentStatus]


def booking_filters(params: dict):
    """search/status/payment query parameters, or an error message."""
    search = params.get("search", "")
    status = params.get("status") or ALL_FILTER
    payment = params.get("payment") or ALL_FILTER
    if status != ALL_FILTER and status not in BOOKING_STATUSES:
        return None, f"Invalid status. Allowed: {[ALL_FILTER] + BOOKING_STATUSES}"
    if payment != ALL_FILTER and payment not in PAYMENT_STATUSES:
        return None, f"Invalid payment. Allowed: {[ALL_FILTER] + PAYMENT_STATUSES}"
    return {"search": search, "status": status, "payment": payment}, None


def get_bookings(event, context):
    try:
        filters, error = booking_filters(event.get("queryStringParameters") or {})
        if error:
            return send_custom_response(400, error)

        bookings = filter_bookings(booking_service.get_all_bookings(), **filters)

        result = []
        for b in bookings:
            item = asdict(b)
            item["allowed_transitions"] = [
                s.value for s in booking_service.allowed_transitions(b.booking_status)
            ]
            result.append(item)

        return send_custom_response(
            200,
            "Bookings retrieved successfully",
            {"count": len(result), "bookings": result},
        )
    except Exception:
        logger.exception("Unhandled error listing bookings")
        return send_custom_response(500, "Internal server error")
