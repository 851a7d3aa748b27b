import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def _failure(status_code: str, message: str) -> dict:
    return JsonOutResult(
        data="",
        status="Failure",
        status_code=status_code,
        message=message
    ).model_dump()


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already built the envelope
        if isinstance(exc.detail, dict) and "status_code" in exc.detail:
            content = {**exc.detail, "data": ""}
        else:
            code = AppStatusCode.AUTHENTICATION_TOKEN_INVALID if exc.status_code in (401, 403) \
                else AppStatusCode.OPERATION_FAILED
            content = _failure(code, str(exc.detail))
        return JSONResponse(content=content, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg')}"
            for err in exc.errors()
        )
        return JSONResponse(content=_failure(AppStatusCode.INVALID_INPUT, errors), status_code=422)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            content=_failure(AppStatusCode.OPERATION_FAILED, "An unexpected error occurred"),
            status_code=500
        )
