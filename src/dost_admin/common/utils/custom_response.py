from pydantic import BaseModel
from typing import Any, Generic, TypeVar, Optional
from dost_admin.common.models.results import ErrorKind, Result

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    status_code: int
    message: Any
    data: Optional[T] = None


def send_custom_response(status_code: int, message: Any, data: Optional[T] = None):
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
        },
        "body": APIResponse(
            status_code=status_code, message=message, data=data
        ).model_dump_json(),
    }


ERROR_STATUS_CODES = {
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.DEMO_MODE: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATE: 409,
    ErrorKind.REMOTE: 500,
}


def send_result_response(result: Result, message: str, data: Optional[T] = None):
    if result.ok:
        return send_custom_response(200, message, data)
    return send_custom_response(
        ERROR_STATUS_CODES.get(result.error.kind, 500),
        result.error.message,
        {"error": result.error.kind.value},
    )


def send_csv_response(filename: str, content: str):
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "text/csv; charset=utf-8",
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
        "body": content,
    }
