import time
import json
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import structlog
from uuid import uuid4

logger = structlog.get_logger()

MAX_LOGGED_VALUE = 100


def _flatten_body(body: bytes, content_type: str) -> dict:
    """Turn a request body into flat ``body_*`` log fields."""
    if "application/json" not in content_type:
        return {"body": body.decode(errors="replace")[:200]}

    try:
        body_data = json.loads(body.decode())
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {"body": body.decode(errors="replace")[:200]}

    if not isinstance(body_data, dict):
        # remove-images sends a bare array of ids
        return {"body": str(body_data)[:200]}

    fields = {}
    for key, value in body_data.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            fields[f"body_{key}"] = value
        elif isinstance(value, list) and len(value) <= 3:
            fields[f"body_{key}"] = value
        else:
            fields[f"body_{key}"] = str(value)[:MAX_LOGGED_VALUE]
    return fields


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid4())
        start_time = time.time()

        log_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        }

        if request.query_params:
            log_data["query_params"] = dict(request.query_params)

        if request.method in ["POST", "PUT", "PATCH"]:
            body = await request.body()
            if body:
                log_data.update(_flatten_body(body, request.headers.get("content-type", "")))

        logger.info("API Request Started", **log_data)

        request.state.request_id = request_id
        request.state.start_time = start_time

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "API Request Failed",
                request_id=request_id,
                path=request.url.path,
                method=request.method,
                error=str(e),
                process_time=round(time.time() - start_time, 4)
            )
            raise

        response_log_data = {
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "process_time": round(time.time() - start_time, 4),
        }

        if response.status_code >= 400:
            logger.warning("API Request Completed with Error", **response_log_data)
        else:
            logger.info("API Request Completed Successfully", **response_log_data)

        response.headers["X-Request-ID"] = request_id
        return response


class StructlogMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request_id = getattr(request.state, "request_id", None) or str(uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method
        )

        try:
            return await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()
