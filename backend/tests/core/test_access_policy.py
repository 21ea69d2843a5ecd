"""Access Policy - verifies the service access table and page checks.

Tests:
    - Membership is exact (no level implies another)
    - Missing level is always denied
    - check_page_access returns None for unknown pages
"""

import pytest

from beavernet.core.access_policy import SERVICE_ACCESS, check_page_access, is_allowed
from beavernet.core.domain_types import AccessLevel


def test_every_service_admits_both_admin_levels():
    for levels in SERVICE_ACCESS.values():
        assert AccessLevel.SUPER_ADMIN.value in levels
        assert AccessLevel.ADMIN.value in levels


@pytest.mark.parametrize("service, level, expected", [
    ("beaverpatch", "911 Dispatcher", True),
    ("beaverpatch", "User", False),
    ("beaverrisk", "911 Supervisor", True),
    ("beaverrisk", "911 Dispatcher", False),
    ("beaverpay", "IT Web Support", False),
    ("beaverdmv", "User", True),
    ("administration", "IT Web Support", True),
    ("administration", "User", False),
])
def test_service_membership(service, level, expected):
    assert is_allowed(level, SERVICE_ACCESS[service]) is expected


def test_missing_level_is_denied():
    assert not is_allowed(None, SERVICE_ACCESS["beaverdoc"])
    assert not is_allowed("", SERVICE_ACCESS["beaverdoc"])


def test_levels_are_case_sensitive():
    assert not is_allowed("superadmin", SERVICE_ACCESS["beaverdoc"])


def test_check_page_access_granted():
    result = check_page_access("beaverpatch", "911 Supervisor")
    assert result["hasAccess"] is True
    assert result["userLevel"] == "911 Supervisor"
    assert result["message"] == "Access granted"
    assert "911 Dispatcher" in result["requiredLevels"]


def test_check_page_access_denied_lists_levels():
    result = check_page_access("administration", "User")
    assert result["hasAccess"] is False
    assert result["message"].startswith("Access denied: Requires one of")
    assert "IT Web Support" in result["message"]


def test_check_page_access_unknown_page():
    assert check_page_access("beavertalk", "SuperAdmin") is None
