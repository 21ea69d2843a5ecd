"""Authentication Gate - verifies Basic auth, access guards and the auth routes.

Invariants:
    - Every /api path, known or not, answers 401 + WWW-Authenticate without
      valid credentials; a malformed Authorization header counts as missing
    - Wrong access level answers 403 with the allowed levels in the message
    - /health probes need no credentials
"""

import base64

import httpx
import pytest


async def test_missing_credentials_returns_challenge(client):
    res = await client.get("/api/incidents")
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == 'Basic realm="BEAVERNET System"'
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_wrong_password_returns_challenge(client):
    res = await client.get("/api/auth/me", auth=httpx.BasicAuth("root", "nope"))
    assert res.status_code == 401
    assert "www-authenticate" in res.headers
    assert res.json()["error"]["message"] == "Invalid credentials"


async def test_unknown_user_is_rejected(client):
    res = await client.get("/api/auth/me", auth=httpx.BasicAuth("ghost", "pw"))
    assert res.status_code == 401


async def test_inactive_user_is_rejected(client, storage, as_user):
    clerk = await storage.get_user_by_username("clerk")
    await storage.users.update(clerk["id"], {"is_active": False})
    res = await client.get("/api/auth/me", auth=as_user("User"))
    assert res.status_code == 401


async def test_me_returns_identity(client, as_user):
    res = await client.get("/api/auth/me", auth=as_user("911 Supervisor"))
    assert res.status_code == 200
    user = res.json()["user"]
    assert user["username"] == "super911"
    assert user["name"] == "Super911 Beaver"
    assert user["accessLevel"] == "911 Supervisor"
    assert "password" not in user


async def test_authenticated_health(client, as_user):
    res = await client.get("/api/health", auth=as_user("User"))
    assert res.json() == {"status": "ok", "authenticated": True}


async def test_probes_need_no_credentials(client):
    assert (await client.get("/health/")).json()["status"] == "healthy"
    ready = await client.get("/health/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"] == {"storage": "memory"}


async def test_wrong_level_is_forbidden(client, as_user):
    res = await client.get("/api/incidents", auth=as_user("User"))
    assert res.status_code == 403
    error = res.json()["error"]
    assert error["code"] == "ACCESS_DENIED"
    assert "911 Dispatcher" in error["message"]
    assert error["user_level"] == "User"


async def test_user_without_level_is_forbidden(client, storage):
    await storage.users.create({"username": "nolevel", "password": "pw", "access_level": ""})
    res = await client.get("/api/customers", auth=httpx.BasicAuth("nolevel", "pw"))
    assert res.status_code == 403
    assert res.json()["error"]["message"] == "Access denied: No access level specified"


async def test_check_access_known_page(client, as_user):
    res = await client.get("/api/auth/check-access/beaverrisk", auth=as_user("911 Dispatcher"))
    assert res.status_code == 200
    assert res.json()["hasAccess"] is False


async def test_check_access_unknown_page(client, as_user):
    res = await client.get("/api/auth/check-access/nowhere", auth=as_user())
    assert res.status_code == 404


async def test_profile_hides_secrets(client, as_user):
    res = await client.get("/api/user/profile", auth=as_user("911 Dispatcher"))
    body = res.json()
    assert res.status_code == 200
    assert body["username"] == "disp911"
    for secret in ("password", "employeePin", "chipCardId"):
        assert secret not in body


async def test_profile_patch_cannot_escalate(client, storage, as_user):
    res = await client.patch(
        "/api/user/profile",
        json={"phone": "555-0100", "accessLevel": "SuperAdmin"},
        auth=as_user("User"),
    )
    assert res.status_code == 200
    assert res.json()["phone"] == "555-0100"
    assert res.json()["accessLevel"] == "User"
    assert (await storage.get_user_by_username("clerk"))["access_level"] == "User"


async def test_verify_pin_success(client, storage, as_user):
    dispatcher = await storage.get_user_by_username("disp911")
    res = await client.post(
        "/api/auth/verify-pin",
        json={"userId": dispatcher["id"], "pin": "4321"},
        auth=as_user("911 Supervisor"),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["sessionId"].startswith("call_")
    assert body["callTaker"] == {"id": dispatcher["id"], "name": "Disp911 Beaver"}


async def test_verify_pin_mismatch_has_no_challenge(client, storage, as_user):
    dispatcher = await storage.get_user_by_username("disp911")
    res = await client.post(
        "/api/auth/verify-pin",
        json={"userId": dispatcher["id"], "pin": "0000"},
        auth=as_user("911 Dispatcher"),
    )
    assert res.status_code == 401
    assert "www-authenticate" not in res.headers


async def test_verify_pin_requires_dispatch_level(client, as_user):
    res = await client.post(
        "/api/auth/verify-pin", json={"userId": 1, "pin": "4321"}, auth=as_user("User"),
    )
    assert res.status_code == 403


async def test_verify_chip_card(client, as_user):
    ok = await client.post(
        "/api/auth/verify-chip-card", json={"chipCardId": "CHIP-911"},
        auth=as_user("911 Dispatcher"),
    )
    assert ok.status_code == 200
    assert ok.json()["callTaker"]["name"] == "Disp911 Beaver"
    bad = await client.post(
        "/api/auth/verify-chip-card", json={"chipCardId": "CHIP-000"},
        auth=as_user("911 Dispatcher"),
    )
    assert bad.status_code == 401


@pytest.mark.parametrize("header", [
    "Basic !!!notbase64",
    "Basic " + base64.b64encode(b"rootpw").decode(),
    "Bearer x",
])
async def test_malformed_header_returns_challenge(client, header):
    res = await client.get("/api/auth/me", headers={"Authorization": header})
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == 'Basic realm="BEAVERNET System"'
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_verify_pin_rejects_inactive_account(client, storage, as_user):
    dispatcher = await storage.get_user_by_username("disp911")
    await storage.users.update(dispatcher["id"], {"is_active": False})
    res = await client.post(
        "/api/auth/verify-pin",
        json={"userId": dispatcher["id"], "pin": "4321"},
        auth=as_user("911 Supervisor"),
    )
    assert res.status_code == 401
    assert "www-authenticate" not in res.headers


async def test_unknown_api_path_needs_credentials(client, as_user):
    res = await client.get("/api/nope")
    assert res.status_code == 401
    assert "www-authenticate" in res.headers

    res = await client.get("/api/nope", auth=as_user("User"))
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_wrong_method_needs_credentials(client):
    res = await client.delete("/api/incidents/1")
    assert res.status_code == 401


async def test_trailing_slash_redirects(client, as_user):
    res = await client.get("/api/incidents/", auth=as_user("911 Dispatcher"))
    assert res.status_code == 307
    assert res.headers["location"].endswith("/api/incidents")
