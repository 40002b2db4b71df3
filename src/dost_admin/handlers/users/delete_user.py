import logging

from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.services.user_service import UserService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
user_repo = UserRepository(client_or_none(settings))
user_service = UserService(user_repo=user_repo, settings=settings)


def delete_user(event, context):
    try:
        path_params = event.get("pathParameters") or {}
        user_id = path_params.get("user_id")
        if not user_id:
            return send_custom_response(400, "user_id is required in the path")

        result = user_service.delete_user(user_id)
        return send_result_response(result, "User deleted successfully", {"user_id": user_id})
    except Exception:
        logger.exception("Unhandled error deleting user")
        return send_custom_response(500, "Internal server error")
