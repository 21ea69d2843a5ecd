"""Access Policy - which access levels reach which service area.

Invariants:
    - Membership is exact: no level implies another
    - A missing or empty access level is never allowed
    - SERVICE_ACCESS is the single table consulted by routers and check-access
"""

from beavernet.core.domain_types import AccessLevel

_ADMINS = (AccessLevel.SUPER_ADMIN.value, AccessLevel.ADMIN.value)
_STAFF = _ADMINS + (AccessLevel.IT_WEB_SUPPORT.value, AccessLevel.USER.value)

SERVICE_ACCESS: dict[str, tuple[str, ...]] = {
    "beaverpatch": _ADMINS + (
        AccessLevel.SUPERVISOR_911.value, AccessLevel.DISPATCHER_911.value,
    ),
    "beaverpaws": _STAFF,
    "beaverlaw": _STAFF,
    "beavercrm": _STAFF,
    "beaverdoc": _STAFF,
    "beaverpay": _ADMINS + (AccessLevel.USER.value,),
    "beaverrisk": _ADMINS + (AccessLevel.SUPERVISOR_911.value,),
    "beaveraudit": _STAFF,
    "beaverdmv": _ADMINS + (
        AccessLevel.SUPERVISOR_911.value, AccessLevel.DISPATCHER_911.value,
        AccessLevel.USER.value,
    ),
    "administration": _ADMINS + (AccessLevel.IT_WEB_SUPPORT.value,),
}


def is_allowed(access_level: str | None, allowed_levels: tuple[str, ...] | list[str]) -> bool:
    if not access_level:
        return False
    return access_level in allowed_levels


def check_page_access(page: str, access_level: str | None) -> dict | None:
    """Build the check-access payload for a page, or None for unknown pages."""
    required = SERVICE_ACCESS.get(page)
    if required is None:
        return None
    allowed = is_allowed(access_level, required)
    return {
        "hasAccess": allowed,
        "userLevel": access_level,
        "requiredLevels": list(required),
        "message": (
            "Access granted" if allowed
            else f"Access denied: Requires one of the following access levels: {', '.join(required)}"
        ),
    }
