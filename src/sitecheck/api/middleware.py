# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Access logging and request correlation for the API."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("sitecheck.api.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one access line per response.

    The ID is taken from the incoming ``X-Request-ID`` header when present,
    stored on ``request.state.request_id``, echoed on the response, and
    attached to the access log record.  Requests that run a remote scan
    can take tens of seconds, so the duration is logged as well.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %d in %.0fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={"request_id": request_id},
        )
        return response
