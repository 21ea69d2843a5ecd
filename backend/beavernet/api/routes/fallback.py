"""API Fallback - unmatched /api requests still pass the Basic auth gate.

Invariants:
    - Included last, so it only sees requests no other route fully matched
    - No credentials -> 401 with the challenge, like every other /api route
    - Authenticated: 405 with Allow when another route owns the path, a
      redirect when only the trailing slash differs, otherwise 404
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from beavernet.api.dependencies import current_identity

HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(prefix="/api", dependencies=[Depends(current_identity)])


def _other_routes(request: Request):
    return [
        route for route in request.app.router.routes
        if getattr(route, "endpoint", None) is not unmatched_api_route
    ]


def allowed_methods(request: Request) -> set[str]:
    """Methods of the routes whose path matches but whose method did not."""
    methods: set[str] = set()
    for route in _other_routes(request):
        match, _ = route.matches(request.scope)
        if match == Match.PARTIAL:
            methods.update(getattr(route, "methods", None) or ())
    return methods


def slash_alternative(request: Request) -> str | None:
    path = request.url.path
    alternative = path[:-1] if path.endswith("/") else f"{path}/"
    scope = {**request.scope, "path": alternative}
    for route in _other_routes(request):
        match, _ = route.matches(scope)
        if match == Match.FULL:
            return alternative
    return None


@router.api_route("/{path:path}", methods=HTTP_METHODS, include_in_schema=False)
async def unmatched_api_route(path: str, request: Request):
    methods = allowed_methods(request)
    if methods:
        raise StarletteHTTPException(405, headers={"Allow": ", ".join(sorted(methods))})
    alternative = slash_alternative(request)
    if alternative is not None:
        return RedirectResponse(request.url.replace(path=alternative), status_code=307)
    raise StarletteHTTPException(404)


routers = [router]
