"""HTTP middleware: timeout, request size limit, request ID, correlation ID, security headers.

Applied in main app; order matters (last added = outermost).
Import and use from taskboard.main.
"""

from taskboard.middleware.limits import RequestSizeLimitMiddleware, TimeoutMiddleware
from taskboard.middleware.request_id import CorrelationIDMiddleware, RequestIDMiddleware
from taskboard.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
