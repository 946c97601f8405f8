"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. create_app() switches it on or off from
settings.rate_limit_enabled.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
WRITE_ENDPOINT_LIMIT = "120/minute"
BULK_WRITE_LIMIT = "20/minute"
BULK_WRITE_SCOPE = "bulk-writes"

# POST /tasks with this header value is a bulk create.
BULK_ACTION_HEADER = "X-Action"
BULK_ACTION = "bulk"


def is_bulk_action(request: Request) -> bool:
    return request.headers.get(BULK_ACTION_HEADER, "").strip().lower() == BULK_ACTION


def _is_not_bulk_action(request: Request) -> bool:
    return not is_bulk_action(request)


limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
# /bulk and the X-Action: bulk form of POST /tasks draw from one bucket.
limit_bulk_writes = limiter.shared_limit(BULK_WRITE_LIMIT, scope=BULK_WRITE_SCOPE)
limit_bulk_action = limiter.shared_limit(
    BULK_WRITE_LIMIT, scope=BULK_WRITE_SCOPE, exempt_when=_is_not_bulk_action
)
