import logging
from dataclasses import asdict

from dost_admin.common.models.payments import PaymentStatus
from dost_admin.common.repository.payment_repo import PaymentRepository
from dost_admin.common.services.filters import filter_payments, payment_method_breakdown
from dost_admin.common.services.payment_service import PaymentService
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import ALL_FILTER
from dost_admin.common.utils.custom_response import send_custom_response
from dost_admin.common.utils.supabase_client import client_or_none

logger = logging.getLogger(__name__)

settings = SupabaseSettings.from_env()
payment_repo = PaymentRepository(client_or_none(settings))
payment_service = PaymentService(payment_repo=payment_repo, settings=settings)


def get_payments(event, context):
    try:
        params = event.get("queryStringParameters") or {}
        search = params.get("search", "")
        status = params.get("status") or ALL_FILTER

        allowed = [ALL_FILTER] + [s.value for s in PaymentStatus]
        if status not in allowed:
            return send_custom_response(400, f"Invalid status. Allowed: {allowed}")

        payments = payment_service.get_all_payments()
        filtered = filter_payments(payments, search=search, status=status)

        result = []
        for p in filtered:
            item = asdict(p)
            item["can_refund"] = payment_service.can_refund(p)
            result.append(item)

        return send_custom_response(
            200,
            "Payments retrieved successfully",
            {
                "count": len(result),
                "payments": result,
                "by_method": payment_method_breakdown(payments),
            },
        )
    except Exception:
        logger.exception("Unhandled error listing payments")
        return send_custom_response(500, "Internal server error")
