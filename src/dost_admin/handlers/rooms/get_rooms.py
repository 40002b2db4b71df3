import logging
from dataclasses import asdict

from dost_admin.common.repository.room_repo import RoomRepository
from dost_admin.common.services.filters import filter_rooms
from dost_admin.common.services.room_service import RoomService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import ALL_FILTER, ROOM_STATUSES
from dost_admin.common.utils.custom_response import send_custom_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
room_repo = RoomRepository(client_or_none(settings))
room_service = RoomService(room_repo=room_repo, settings=settings)


def get_rooms(event, context):
    try:
        params = event.get("queryStringParameters") or {}
        search = params.get("search", "")
        status = params.get("status") or ALL_FILTER

        if status != ALL_FILTER and status not in ROOM_STATUSES:
            return send_custom_response(
                400, f"Invalid status. Allowed: {[ALL_FILTER] + ROOM_STATUSES}"
            )

        rooms = room_service.get_all_rooms()
        filtered = filter_rooms(rooms, search=search, status=status)

        return send_custom_response(
            200,
            "successfully retrieved",
            {
                "count": len(filtered),
                "total_rooms": room_service.get_count(),
                "available_rooms": room_service.get_available_count(),
                "rooms": [asdict(r) for r in filtered],
            },
        )
    except Exception:
        logger.exception("Unhandled error listing rooms")
        return send_custom_response(500, "Internal server error")
