import logging

from pydantic import ValidationError

from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.schemas.users import UserStatusRequest
from dost_admin.common.services.user_service import UserService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
user_repo = UserRepository(client_or_none(settings))
user_service = UserService(user_repo=user_repo, settings=settings)


def update_user_status(event, context):
    try:
        path_params = event.get("pathParameters") or {}
        user_id = path_params.get("user_id")
        if not user_id:
            return send_custom_response(400, "user_id is required in the path")

        if not event.get("body"):
            return send_custom_response(400, "Request body is required")
        try:
            request_body = UserStatusRequest.model_validate_json(event["body"])
        except ValidationError as e:
            return send_custom_response(400, e.errors(include_url=False, include_context=False))

        result = user_service.update_user_status(user_id, request_body.status)
        return send_result_response(
            result,
            "User status updated successfully",
            {"user_id": user_id, "new_status": request_body.status.value},
        )
    except Exception:
        logger.exception("Unhandled error updating user status")
        return send_custom_response(500, "Internal server error")
