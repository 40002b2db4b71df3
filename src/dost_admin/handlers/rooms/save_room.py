import base64
import binascii
import json
import logging
from dataclasses import asdict

from pydantic import ValidationError

from dost_admin.common.repository.image_repo import ImageFile, ImageRepository
from dost_admin.common.repository.room_repo import RoomRepository
from dost_admin.common.schemas.rooms import RoomRequest, RoomUpdateRequest
from dost_admin.common.services.room_service import RoomService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import MAX_ROOM_IMAGES
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
client = client_or_none(settings)
room_repo = RoomRepository(client)
image_repo = ImageRepository(client, settings.image_bucket)
room_service = RoomService(room_repo=room_repo, settings=settings, image_repo=image_repo)


def _decode_files(raw_files) -> list:
    files = []
    for raw in raw_files:
        files.append(
            ImageFile(
                filename=raw["filename"],
                content=base64.b64decode(raw["content_base64"], validate=True),
                content_type=raw.get("content_type") or "application/octet-stream",
            )
        )
    return files


def save_room(event, context):
    """Create a room, or update one when ``room_id`` is in the path.

    New images arrive base64 encoded under ``files`` and are appended to the
    ``images`` sent in the body or, for an update that sends none, to the
    images already stored on the room. Files are only uploaded once the room
    fields are valid.
    """
    try:
        path_params = event.get("pathParameters") or {}
        room_id = path_params.get("room_id")

        if not event.get("body"):
            return send_custom_response(400, "Request body is required")
        try:
            body = json.loads(event["body"])
        except json.JSONDecodeError:
            return send_custom_response(400, "Invalid JSON body")
        if not isinstance(body, dict):
            return send_custom_response(400, "Request body must be a JSON object")

        try:
            files = _decode_files(body.pop("files", None) or [])
        except (KeyError, TypeError, binascii.Error):
            return send_custom_response(
                400, "files must be a list of {filename, content_base64}"
            )

        model = RoomUpdateRequest if room_id else RoomRequest
        try:
            request_body = model.model_validate(body)
        except ValidationError as e:
            return send_custom_response(400, e.errors(include_url=False, include_context=False))

        if files:
            images = request_body.images
            if images is None:
                # update without an images list keeps what the room already has
                room = room_service.get_room(room_id)
                if room is None:
                    return send_custom_response(404, f"room '{room_id}' not found")
                images = room.images
            if len(images) + len(files) > MAX_ROOM_IMAGES:
                return send_custom_response(400, f"Maximum {MAX_ROOM_IMAGES} images allowed")

            request_body = request_body.model_copy(
                update={"images": list(images) + room_service.upload_images(files)}
            )

        if room_id:
            result = room_service.update_room(room_id, request_body)
        else:
            result = room_service.create_room(request_body)

        data = asdict(result.data) if result.ok and result.data else None
        return send_result_response(
            result, "Room updated successfully" if room_id else "Room created successfully", data
        )
    except Exception:
        logger.exception("Unhandled error saving room")
        return send_custom_response(500, "Internal server error")
