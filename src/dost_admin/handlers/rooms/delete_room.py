import logging

from dost_admin.common.repository.room_repo import RoomRepository
from dost_admin.common.services.room_service import RoomService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
room_repo = RoomRepository(client_or_none(settings))
room_service = RoomService(room_repo=room_repo, settings=settings)


def delete_room(event, context):
    try:
        path_params = event.get("pathParameters") or {}
        room_id = path_params.get("room_id")
        if not room_id:
            return send_custom_response(400, "room_id is required in the path")

        result = room_service.delete_room(room_id)
        return send_result_response(result, "Room deleted successfully", {"room_id": room_id})
    except Exception:
        logger.exception("Unhandled error deleting room")
        return send_custom_response(500, "Internal server error")
