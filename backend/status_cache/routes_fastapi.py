"""
Status Cache API Routes

One catch-all endpoint, dispatched on method:
- GET    /{key} - cached image, filled from the origin on miss
- PUT    /{key} - store the request body as the image
- DELETE /{key} - remove the cached image

The route is registered without a method list so every verb reaches
the handler, and the key is validated before the method is looked at.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from .coordinator import CacheCoordinator, CacheOutcome, CacheResult
from .keys import validate_key

logger = logging.getLogger(__name__)

ROUTE_PATH = "/{raw_key:path}"
ALLOWED_METHODS = "GET, PUT, DELETE"
IMAGE_MEDIA_TYPE = "image/jpeg"

# Status code and plain-text body per outcome
OUTCOME_RESPONSES = {
    CacheOutcome.NOT_FOUND: (404, "Not Found"),
    CacheOutcome.WRITTEN: (201, "Created"),
    CacheOutcome.WRITE_FAILED: (500, "Internal Server Error"),
    CacheOutcome.DELETED: (200, "OK"),
}


def raw_key(request: Request) -> str:
    """
    Key exactly as it appeared on the request line.

    Uses the undecoded path so percent-escapes are not turned into digits,
    and keeps any query string.
    """
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    path = path.split("?", 1)[0]
    query = request.scope.get("query_string", b"").decode("latin-1")
    key = path[1:] if path.startswith("/") else path
    return f"{key}?{query}" if query else key


def _to_response(result: CacheResult) -> Response:
    if result.outcome == CacheOutcome.HIT:
        return Response(content=result.data, media_type=IMAGE_MEDIA_TYPE, headers={"X-Cache": "HIT"})
    if result.outcome == CacheOutcome.FILLED:
        return Response(content=result.data, media_type=IMAGE_MEDIA_TYPE, headers={"X-Cache": "MISS"})

    status_code, body = OUTCOME_RESPONSES[result.outcome]
    return PlainTextResponse(body, status_code=status_code)


# ============================================
# Endpoint
# ============================================

async def status_image(request: Request) -> Response:
    """
    Serve, store or remove the cached image for a status code.

    Example:
        GET /404
        PUT /404   (body: image bytes)
        DELETE /404
    """
    method = request.method
    logger.info(f"[StatusCache] {method} {request.url.path}")

    key: Optional[str] = validate_key(raw_key(request))
    if key is None:
        return PlainTextResponse("Bad Request - Invalid HTTP status code", status_code=400)

    coordinator: CacheCoordinator = request.app.state.coordinator

    if method == "GET":
        result = await coordinator.fetch(key)
    elif method == "PUT":
        # Buffer the whole upload before anything touches the disk
        body = await request.body()
        result = await coordinator.put(key, body)
    elif method == "DELETE":
        result = await coordinator.delete(key)
    else:
        return PlainTextResponse(
            "Method Not Allowed",
            status_code=405,
            headers={"Allow": ALLOWED_METHODS},
        )

    return _to_response(result)


def register_routes(app: FastAPI) -> None:
    """Attach the catch-all endpoint, accepting any method."""
    app.add_route(ROUTE_PATH, status_image, methods=None, include_in_schema=False)
