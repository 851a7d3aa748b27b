from fastapi import HTTPException
from typing import Any

from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import JsonOutResult


def success_response(data: Any, message: str = "Success", status_code: str = AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY):
    return JsonOutResult(
        data=data,
        status="Success",
        status_code=status_code,
        message=message
    )


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, http_status: int = 400):
    raise HTTPException(
        status_code=http_status,
        detail=JsonOutResult(
            data=None,
            status="Failure",
            status_code=status_code,
            message=message
        ).model_dump()
    )


def not_found(entity: str):
    return error_response(
        message=f"{entity} not found",
        status_code=AppStatusCode.NOT_FOUND,
        http_status=404
    )


def invalid_input(message: str):
    return error_response(
        message=message,
        status_code=AppStatusCode.INVALID_INPUT,
        http_status=400
    )


def invalid_state(message: str):
    return error_response(
        message=message,
        status_code=AppStatusCode.INVALID_STATE,
        http_status=400
    )
