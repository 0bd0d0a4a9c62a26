"""
Custom middleware for the FastAPI application.

- Request ID generation and propagation to log records
"""

import logging
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from authcore.infrastructure.config.logging import correlation_id_var


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and track request IDs.

    Reuses an incoming ``X-Request-ID`` header when present, otherwise
    generates a UUID. The id is stored in ``request.state.request_id``,
    exposed to log records through the correlation id context variable
    and echoed in the response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        token = correlation_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
