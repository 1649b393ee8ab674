import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware

from mentorme.core.logging import latency_bucket_ms, log_event, request_id_ctx_var


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request id for the lifetime of each request and echo it back."""

    def __init__(self, app, header_name: str = "x-request-id"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request, call_next):
        rid = request.headers.get(self.header_name) or str(uuid4())
        request.state.request_id = rid
        token = request_id_ctx_var.set(rid)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[self.header_name] = rid
        log_event(
            "info",
            "request.complete",
            request_id=rid,
            event_type="http",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "latency_bucket": latency_bucket_ms(elapsed_ms),
            },
        )
        return response
