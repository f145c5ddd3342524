# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "memberdirectory_requests_total",
    "Total HTTP requests to member-directory service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "memberdirectory_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "memberdirectory_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Portal client metrics (updated by the client only) ──
PORTAL_REQUESTS = Counter(
    "portal_requests_total",
    "Outbound Portal API requests by operation and HTTP status",
    ["operation", "status"],
)
PORTAL_LATENCY = Histogram(
    "portal_request_duration_seconds",
    "Portal API round-trip time in seconds",
    ["operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
PORTAL_FALLBACKS = Counter(
    "portal_fallbacks_total",
    "Degraded responses by operation and reason",
    ["operation", "reason"],
)
PORTAL_CACHE_HITS = Counter(
    "portal_cache_hits_total",
    "Portal responses served from the in-memory cache",
    ["operation"],
)
BULLETIN_SYNCS = Counter(
    "bulletin_sync_total",
    "Bulletin sync outcomes",
    ["result"],
)
