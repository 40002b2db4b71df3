import logging
from dataclasses import asdict

from dost_admin.common.repository.payment_repo import PaymentRepository
from dost_admin.common.services.payment_service import PaymentService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_response import send_custom_response, send_result_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
payment_repo = PaymentRepository(client_or_none(settings))
payment_service = PaymentService(payment_repo=payment_repo, settings=settings)


def refund_payment(event, context):
    try:
        path_params = event.get("pathParameters") or {}
        payment_id = path_params.get("payment_id")
        if not payment_id:
            return send_custom_response(400, "payment_id is required in the path")

        result = payment_service.refund_payment(payment_id)
        data = asdict(result.data) if result.ok else None
        return send_result_response(result, "Payment refunded successfully", data)
    except Exception:
        logger.exception("Unhandled error refunding payment")
        return send_custom_response(500, "Internal server error")
