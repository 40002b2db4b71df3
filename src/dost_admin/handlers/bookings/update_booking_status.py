import logging

from pydantic import ValidationError

from dost_admin.common.repository.booking_repo import BookingRepository
from dost_admin.common.schemas.bookings import BookingStatusRequest
from dost_admin.common.services.booking_service import BookingService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
booking_repo = BookingRepository(client_or_none(settings))
booking_service = BookingService(booking_repo=booking_repo, settings=settings)


def update_booking_status(event, context):
    try:
        path_params = event.get("pathParameters") or {}
        booking_id = path_params.get("booking_id")
        if not booking_id:
            return send_custom_response(400, "booking_id is required in the path")

        if not event.get("body"):
            return send_custom_response(400, "Request body is required")
        try:
            request_body = BookingStatusRequest.model_validate_json(event["body"])
        except ValidationError as e:
            return send_custom_response(400, e.errors(include_url=False, include_context=False))

        result = booking_service.update_booking_status(booking_id, request_body.status)
        return send_result_response(
            result,
            "Booking status updated successfully",
            {"booking_id": booking_id, "new_status": request_body.status.value},
        )
    except Exception:
        logger.exception("Unhandled error updating booking status")
        return send_custom_response(500, "Internal server error")
