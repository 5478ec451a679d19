"""
Response envelope for the invoice API.
Every successful JSON reply (invoice states, views, words, day spans) goes
out as {"success": true, "data": ...}, so the editor reads one shape.
"""

import json
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware


# Request-state flag for routes that reply without the envelope
SKIP_INTERCEPTOR_KEY = "skip_interceptor"

# OpenAPI schema and docs pages
EXCLUDED_PATHS = ("/openapi.json", "/docs", "/redoc")


class SuccessResponseInterceptor(BaseHTTPMiddleware):
    """
    Wraps 2xx JSON replies in the invoice API envelope.

    A list reply also carries "count". Errors (404 for an unknown line item,
    422 for bad input, 500 from the global handler) keep their own body.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        if request.url.path in EXCLUDED_PATHS:
            return response

        if not (200 <= response.status_code < 300):
            return response

        if getattr(request.state, SKIP_INTERCEPTOR_KEY, False):
            return response

        if "application/json" not in response.headers.get("content-type", ""):
            return response

        body = b""
        async for chunk in response.body_iterator:
            body += chunk

        headers = dict(response.headers)
        try:
            data = json.loads(body.decode())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return Response(
                content=body, status_code=response.status_code, headers=headers
            )

        envelope = {"success": True, "data": data}
        if isinstance(data, list):
            envelope["count"] = len(data)

        headers.pop("content-length", None)
        return JSONResponse(
            content=envelope, status_code=response.status_code, headers=headers
        )


def skip_interceptor(func: Callable) -> Callable:
    """
    Mark a route to reply without the envelope (used by /api/health).

    Usage:
        @app.get("/api/health")
        @skip_interceptor
        async def health():
            return {"status": "ok"}
    """
    setattr(func, SKIP_INTERCEPTOR_KEY, True)
    return func


class CustomAPIRoute(APIRoute):
    """
    Route class that passes a route's skip_interceptor mark to the middleware
    through request.state.
    """

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()
        skip = getattr(self.endpoint, SKIP_INTERCEPTOR_KEY, False)

        async def route_handler(request: Request) -> Response:
            if skip:
                setattr(request.state, SKIP_INTERCEPTOR_KEY, True)
            return await handler(request)

        return route_handler
