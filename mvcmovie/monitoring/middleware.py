"""Prometheus request metrics for the web application.

Every request is counted and timed under its route template
(``/movies/{movie_id}``), never its concrete URL, so label
cardinality does not grow with the catalog. The scrape endpoint
itself is not measured.
"""

import time

from fastapi import FastAPI
from prometheus_client import Counter, Gauge, Histogram, make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

METRICS_PATH = "/metrics"

HTTP_REQUESTS_TOTAL = Counter(
    "mvcmovie_http_requests_total",
    "HTTP requests handled, by method, route template and status",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "mvcmovie_http_request_duration_seconds",
    "Time spent handling an HTTP request",
    ["method", "path"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "mvcmovie_http_requests_in_progress",
    "HTTP requests currently being handled",
    ["method"],
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Counts, times and tracks in-flight requests."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Measure one request.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware or the route handler.

        Returns:
            The downstream response, unchanged.
        """
        if request.url.path.startswith(METRICS_PATH):
            return await call_next(request)

        method = request.method

        with HTTP_REQUESTS_IN_PROGRESS.labels(method=method).track_inprogress():
            started = time.perf_counter()
            response = await call_next(request)
            elapsed = time.perf_counter() - started

        # The router records the matched route in the scope while dispatching.
        path = route_template(request)
        HTTP_REQUESTS_TOTAL.labels(method=method, path=path, status=str(response.status_code)).inc()
        HTTP_REQUEST_DURATION.labels(method=method, path=path).observe(elapsed)
        return response


def route_template(request: Request) -> str:
    """Path template of the route serving ``request``.

    Only meaningful once the request has been routed. Falls back to
    the raw path for unmatched URLs (404s).
    """
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


def mount_metrics(app: FastAPI) -> None:
    """Serve the default registry in text exposition format at /metrics."""
    app.mount(METRICS_PATH, make_asgi_app())
