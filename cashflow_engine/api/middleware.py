"""Request tracing and latency middleware for the calculation API"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from cashflow_engine.config import settings
from cashflow_engine.infrastructure.observability.logging import log_request
from cashflow_engine.infrastructure.observability.metrics import request_duration_histogram

MAX_REQUEST_ID_LENGTH = 64

# Liveness and scrape endpoints stay out of the latency histogram
UNTRACKED_PATHS = frozenset({"/health", "/metrics"})


def _incoming_request_id(request: Request) -> str | None:
    """Caller-supplied ID, so one upsert batch can be traced across services"""
    value = request.headers.get(settings.request_id_header)
    if value and len(value) <= MAX_REQUEST_ID_LENGTH and value.isprintable():
        return value
    return None


def _endpoint_label(request: Request) -> str:
    """Route template of the matched endpoint; unknown paths share one label"""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's request ID or mint one, and echo it back"""

    async def dispatch(self, request: Request, call_next):
        request_id = _incoming_request_id(request) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[settings.request_id_header] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Time calculation requests into the latency histogram and the request log"""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in UNTRACKED_PATHS:
            return await call_next(request)

        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        endpoint = _endpoint_label(request)
        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
        ).observe(duration)
        log_request(
            getattr(request.state, "request_id", "unknown"),
            request.method,
            endpoint,
            response.status_code,
            duration * 1000,
        )

        return response
