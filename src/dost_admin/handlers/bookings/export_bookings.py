import logging

from dost_admin.common.repository.booking_repo import BookingRepository
from dost_admin.common.services.booking_service import BookingService
from dost_admin.common.services.export_service import (
    BOOKINGS_EXPORT_FILENAME,
    bookings_to_csv,
)
from dost_admin.common.services.filters import filter_bookings
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_csv_response, send_custom_response
from dost_admin.common.utils.supabase_client import client_or_none
from dost_admin.handlers.bookings.get_bookings import booking_filters

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
booking_repo = BookingRepository(client_or_none(settings))
booking_service = BookingService(booking_repo=booking_repo, settings=settings)


def export_bookings(event, context):
    """CSV of the bookings matching the same filters as the listing."""
    try:
        filters, error = booking_filters(event.get("queryStringParameters") or {})
        if error:
            return send_custom_response(400, error)

        bookings = filter_bookings(booking_service.get_all_bookings(), **filters)
        return send_csv_response(BOOKINGS_EXPORT_FILENAME, bookings_to_csv(bookings))
    except Exception:
        logger.exception("Unhandled error exporting bookings")
        return send_custom_response(500, "Internal server error")
