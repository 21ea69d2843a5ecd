"""Auth Routes - identity echo, page access checks, profile, and 911 step-up auth.

Invariants:
    - Every route here sits behind the Basic gate (current_identity)
    - check-access answers for known pages only (404 otherwise)
    - verify-pin / verify-chip-card are restricted to BeaverPatch levels and
      answer 401 without a Basic challenge on mismatch
    - Profile responses never include password, employee_pin or chip_card_id
"""

import logging

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import current_identity, get_storage, require_service
from beavernet.api.routes.crud import get_or_404
from beavernet.core.access_policy import check_page_access
from beavernet.core.errors import (
    CallTakerVerificationError, ErrorContext, ResourceNotFoundError,
)
from beavernet.core.identity import (
    Identity, display_name, new_call_session_id, secret_matches,
)
from beavernet.schemas.base import to_response
from beavernet.schemas.users import (
    USER_SECRET_FIELDS, UserProfileUpdate, VerifyChipCardRequest, VerifyPinRequest,
)
from beavernet.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"], dependencies=[Depends(current_identity)])


def _call_taker_session(user: dict) -> dict:
    return {
        "success": True,
        "sessionId": new_call_session_id(),
        "callTaker": {"id": user["id"], "name": display_name(user)},
    }


@router.get("/auth/me")
async def me(identity: Identity = Depends(current_identity)):
    return {"user": identity.to_response()}


@router.get("/health")
async def authenticated_health():
    return {"status": "ok", "authenticated": True}


@router.get("/auth/check-access/{page}")
async def check_access(page: str, identity: Identity = Depends(current_identity)):
    result = check_page_access(page, identity.access_level)
    if result is None:
        raise ResourceNotFoundError("Page", page)
    return result


@router.post(
    "/auth/verify-pin", dependencies=[Depends(require_service("beaverpatch"))],
)
async def verify_pin(body: VerifyPinRequest, storage: Storage = Depends(get_storage)):
    user = await storage.users.get(body.user_id)
    if (
        user is None
        or user.get("is_active") is False
        or not secret_matches(user.get("employee_pin"), body.pin)
    ):
        raise CallTakerVerificationError("PIN", ErrorContext(resource=f"user:{body.user_id}"))
    logger.info("Call taker verified by PIN", extra={"username": user["username"]})
    return _call_taker_session(user)


@router.post(
    "/auth/verify-chip-card", dependencies=[Depends(require_service("beaverpatch"))],
)
async def verify_chip_card(
    body: VerifyChipCardRequest, storage: Storage = Depends(get_storage),
):
    user = await storage.get_user_by_chip_card(body.chip_card_id)
    if user is None or user.get("is_active") is False:
        raise CallTakerVerificationError("chip card")
    logger.info("Call taker verified by chip card", extra={"username": user["username"]})
    return _call_taker_session(user)


@router.get("/user/profile")
async def get_profile(
    identity: Identity = Depends(current_identity), storage: Storage = Depends(get_storage),
):
    user = await get_or_404(storage, "users", identity.id)
    return to_response(user, USER_SECRET_FIELDS)


@router.patch("/user/profile")
async def update_profile(
    body: UserProfileUpdate,
    identity: Identity = Depends(current_identity),
    storage: Storage = Depends(get_storage),
):
    user = await storage.users.update(identity.id, body.to_record())
    if user is None:
        raise ResourceNotFoundError("User", identity.id)
    return to_response(user, USER_SECRET_FIELDS)


routers = [router]
