import logging
from dataclasses import asdict

from pydantic import ValidationError

from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.schemas.users import LoginRequest
from dost_admin.common.services.auth_service import AuthService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
user_repo = UserRepository(client_or_none(settings))
auth_service = AuthService(user_repo=user_repo, settings=settings)


def login(event, context):
    """Resolve the admin account for the posted email.

    Session state (signed-in user, remembered email, notifications) belongs to
    the caller: the response carries the user and, when ``remember_me`` is set,
    the email to keep.
    """
    try:
        request_body = LoginRequest.model_validate_json(event.get("body") or "{}")
    except ValidationError as e:
        return send_custom_response(400, e.errors(include_url=False, include_context=False))
    try:
        result = auth_service.sign_in(request_body.email, request_body.password)
        data = None
        if result.ok:
            logger.info(f"Admin {result.data.email} signed in")
            data = {
                "user": asdict(result.data),
                "remembered_email": request_body.email if request_body.remember_me else None,
            }
        return send_result_response(result, "login successful", data)
    except Exception:
        logger.exception("Unhandled error during login")
        return send_custom_response(500, "Internal server error")
