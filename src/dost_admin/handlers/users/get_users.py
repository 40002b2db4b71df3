import logging
from dataclasses import asdict

from dost_admin.common.models.users import UserStatus
from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.services.filters import filter_users
from dost_admin.common.services.user_service import UserService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import ALL_FILTER
from dost_admin.common.utils.custom_response import send_custom_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
user_repo = UserRepository(client_or_none(settings))
user_service = UserService(user_repo=user_repo, settings=settings)


def get_users(event, context):
    try:
        params = event.get("queryStringParameters") or {}
        search = params.get("search", "")
        status = params.get("status") or ALL_FILTER

        allowed = [ALL_FILTER] + [s.value for s in UserStatus]
        if status not in allowed:
            return send_custom_response(400, f"Invalid status. Allowed: {allowed}")

        users = filter_users(user_service.get_all_users(), search=search, status=status)
        return send_custom_response(
            200,
            "Users retrieved successfully",
            {"count": len(users), "users": [asdict(u) for u in users]},
        )
    except Exception:
        logger.exception("Unhandled error listing users")
        return send_custom_response(500, "Internal server error")
