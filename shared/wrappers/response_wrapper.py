from starlette.middleware.base import BaseHTTPMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi import Request
from shared.core.schemas import JsonOutResult
from typing import Callable, Any
import json


def replace_nulls_with_empty(value: Any):
    """
    Recursively replaces None based on expected structure:
    - List fields -> []
    - Primitives -> ""
    """
    if isinstance(value, dict):
        cleaned = {}
        for k, v in value.items():
            if v is None and k.lower() in {"items", "bookings", "bills", "rooms"}:
                cleaned[k] = []
            else:
                cleaned[k] = replace_nulls_with_empty(v)
        return cleaned

    elif isinstance(value, list):
        return [replace_nulls_with_empty(v) for v in value]

    elif value is None:
        return ""

    return value


def _is_wrapped(data: Any) -> bool:
    return isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys())


class JsonResponseMiddleware(BaseHTTPMiddleware):
    """Wraps successful JSON bodies in the JsonOutResult envelope.

    Error bodies are already shaped by the exception handlers and pass
    through untouched.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        # Skip docs/openapi endpoints
        if request.url.path.startswith(("/openapi", "/docs", "/redoc")):
            return await call_next(request)

        response = await call_next(request)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type or not (200 <= response.status_code < 400):
            return response

        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        headers = {k: v for k, v in response.headers.items()
                   if k.lower() != "content-length"}

        try:
            data = json.loads(body_bytes.decode("utf-8"))
        except ValueError:
            return Response(content=body_bytes, status_code=response.status_code, headers=headers)

        if _is_wrapped(data):
            return JSONResponse(
                content=replace_nulls_with_empty(data),
                status_code=response.status_code,
                headers=headers,
            )

        wrapped = JsonOutResult(
            data=data,
            status="Success",
            status_code=str(response.status_code),
            message="Data retrieved successfully"
        ).model_dump(exclude_none=False)

        return JSONResponse(
            content=replace_nulls_with_empty(wrapped),
            status_code=response.status_code,
            headers=headers,
        )

