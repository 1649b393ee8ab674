from starlette.middleware.base import BaseHTTPMiddleware

from mentorme.core.logging import get_request_id
from mentorme.core.tracing import start_span


class TracingMiddleware(BaseHTTPMiddleware):
    """Wrap each mentor request in an HTTP span when tracing is enabled."""

    async def dispatch(self, request, call_next):
        with start_span(
            "http.request",
            {
                "http.method": request.method,
                "http.route": request.url.path,
                "request_id": getattr(request.state, "request_id", None) or get_request_id(),
            },
        ) as span:
            response = await call_next(request)
            if span is not None:
                span.set_attribute("http.status_code", response.status_code)
            return response
