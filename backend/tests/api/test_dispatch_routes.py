"""Dispatch Routes - verifies incident CRUD, unit assignment and the resolve cascade.

Invariants:
    - POST creates (201) with a derived incident number; GET /{id} 404s when absent
    - Invalid bodies answer 400 with field details, before any write
    - Assigning dispatches the unit and moves a "new" incident to "dispatched"
    - Resolving releases every tied unit and completes open assignments,
      but a unit already reassigned elsewhere stays dispatched
    - An explicit null on a required field is a 400 on both backends
"""

from datetime import datetime

import pytest

INCIDENT = {
    "type": "medical", "priority": "high", "address": "12 Beaver Way",
    "description": "Fall, conscious",
}


@pytest.fixture
def dispatcher(as_user):
    return as_user("911 Dispatcher")


async def _create(client, auth, path, body):
    res = await client.post(path, json=body, auth=auth)
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_and_fetch_incident(client, dispatcher):
    created = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    assert created["id"] == 1
    assert created["status"] == "new"
    assert created["incidentNumber"].endswith("-001")
    assert created["createdAt"] == created["updatedAt"]

    res = await client.get("/api/incidents/1", auth=dispatcher)
    assert res.json()["address"] == "12 Beaver Way"


async def test_list_incidents(client, dispatcher):
    await _create(client, dispatcher, "/api/incidents", INCIDENT)
    await _create(client, dispatcher, "/api/incidents", {**INCIDENT, "priority": "low"})
    res = await client.get("/api/incidents", auth=dispatcher)
    assert [i["priority"] for i in res.json()] == ["high", "low"]


async def test_missing_incident_is_404(client, dispatcher):
    res = await client.get("/api/incidents/99", auth=dispatcher)
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Incident '99' not found"


async def test_invalid_body_is_400_with_details(client, storage, dispatcher):
    res = await client.post(
        "/api/incidents", json={**INCIDENT, "priority": "urgent"}, auth=dispatcher,
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("priority") for d in error["details"])
    assert await storage.incidents.get_all() == []


async def test_patch_and_put_apply_partial_updates(client, dispatcher):
    created = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    patched = await client.patch(
        f"/api/incidents/{created['id']}", json={"comments": "Caller on scene"},
        auth=dispatcher,
    )
    assert patched.json()["comments"] == "Caller on scene"
    assert patched.json()["address"] == "12 Beaver Way"

    put = await client.put(
        f"/api/incidents/{created['id']}", json={"priority": "medium"}, auth=dispatcher,
    )
    assert put.json()["priority"] == "medium"
    assert put.json()["comments"] == "Caller on scene"
    before = datetime.fromisoformat(created["updatedAt"])
    assert datetime.fromisoformat(put.json()["updatedAt"]) > before


async def test_update_missing_record_is_404(client, dispatcher):
    res = await client.patch("/api/units/42", json={"status": "busy"}, auth=dispatcher)
    assert res.status_code == 404


async def test_no_delete_route(client, dispatcher):
    await _create(client, dispatcher, "/api/incidents", INCIDENT)
    res = await client.delete("/api/incidents/1", auth=dispatcher)
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
    assert "GET" in res.headers["allow"]


async def test_assign_unit_dispatches_both(client, dispatcher):
    incident = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    unit = await _create(client, dispatcher, "/api/units", {"unitNumber": "A-1", "type": "ambulance"})

    res = await client.post(
        f"/api/incidents/{incident['id']}/assign", json={"unitId": unit["id"]},
        auth=dispatcher,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["assignment"]["status"] == "assigned"
    assert body["unit"]["status"] == "dispatched"
    assert body["unit"]["assignedIncidentId"] == incident["id"]
    assert body["incident"]["status"] == "dispatched"

    units = await client.get(f"/api/incidents/{incident['id']}/units", auth=dispatcher)
    assert [a["unitId"] for a in units.json()] == [unit["id"]]
    history = await client.get(f"/api/units/{unit['id']}/assignments", auth=dispatcher)
    assert len(history.json()) == 1


async def test_assign_missing_unit_is_404(client, dispatcher):
    incident = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    res = await client.post(
        f"/api/incidents/{incident['id']}/assign", json={"unitId": 7}, auth=dispatcher,
    )
    assert res.status_code == 404


async def test_resolve_releases_units(client, storage, dispatcher):
    incident = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    first = await _create(client, dispatcher, "/api/units", {"unitNumber": "P-1", "type": "police"})
    second = await _create(client, dispatcher, "/api/units", {"unitNumber": "F-1", "type": "fire"})
    await client.post(
        f"/api/incidents/{incident['id']}/assign", json={"unitId": first["id"]}, auth=dispatcher,
    )
    # Tied only through assigned_incident_id
    await client.patch(
        f"/api/units/{second['id']}",
        json={"status": "busy", "assignedIncidentId": incident["id"]},
        auth=dispatcher,
    )

    res = await client.post(
        f"/api/incidents/{incident['id']}/status", json={"status": "resolved"}, auth=dispatcher,
    )
    assert res.status_code == 200
    assert res.json()["status"] == "resolved"

    for unit_id in (first["id"], second["id"]):
        unit = await storage.units.get(unit_id)
        assert unit["status"] == "available"
        assert unit["assigned_incident_id"] is None
    assignments = await storage.get_incident_units(incident["id"])
    assert [a["status"] for a in assignments] == ["completed"]


async def test_non_resolving_status_keeps_units(client, storage, dispatcher):
    incident = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    unit = await _create(client, dispatcher, "/api/units", {"unitNumber": "P-1", "type": "police"})
    await client.post(
        f"/api/incidents/{incident['id']}/assign", json={"unitId": unit["id"]}, auth=dispatcher,
    )
    await client.post(
        f"/api/incidents/{incident['id']}/status", json={"status": "active"}, auth=dispatcher,
    )
    assert (await storage.units.get(unit["id"]))["status"] == "dispatched"


async def test_status_rejects_unknown_value(client, dispatcher):
    incident = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    res = await client.post(
        f"/api/incidents/{incident['id']}/status", json={"status": "closed"}, auth=dispatcher,
    )
    assert res.status_code == 400


async def test_call_entry_logs_for_incident(client, dispatcher):
    incident = await _create(client, dispatcher, "/api/incidents", INCIDENT)
    await _create(client, dispatcher, "/api/call-entry-logs", {
        "incidentId": incident["id"], "callTakerName": "Disp911 Beaver",
        "authMethod": "pin", "sessionId": "call_abc",
    })
    res = await client.get(f"/api/incidents/{incident['id']}/call-entry-logs", auth=dispatcher)
    logs = res.json()
    assert len(logs) == 1
    assert logs[0]["entryTime"] is not None


async def test_resolve_leaves_reassigned_unit_alone(any_client, any_storage, as_user):
    auth = as_user("911 Dispatcher")
    first = await _create(any_client, auth, "/api/incidents", INCIDENT)
    second = await _create(any_client, auth, "/api/incidents", {**INCIDENT, "type": "fire"})
    unit = await _create(any_client, auth, "/api/units", {"unitNumber": "A-7", "type": "ambulance"})
    for incident in (first, second):
        res = await any_client.post(
            f"/api/incidents/{incident['id']}/assign", json={"unitId": unit["id"]}, auth=auth,
        )
        assert res.status_code == 200

    res = await any_client.post(
        f"/api/incidents/{first['id']}/status", json={"status": "resolved"}, auth=auth,
    )
    assert res.status_code == 200

    current = await any_storage.units.get(unit["id"])
    assert current["status"] == "dispatched"
    assert current["assigned_incident_id"] == second["id"]
    closed = await any_storage.get_incident_units(first["id"])
    assert [a["status"] for a in closed] == ["completed"]
    still_open = await any_storage.get_incident_units(second["id"])
    assert [a["status"] for a in still_open] == ["assigned"]


async def test_null_on_required_field_is_400(any_client, any_storage, as_user):
    auth = as_user("911 Dispatcher")
    incident = await _create(any_client, auth, "/api/incidents", INCIDENT)
    for method in ("patch", "put"):
        res = await getattr(any_client, method)(
            f"/api/incidents/{incident['id']}", json={"type": None, "status": None},
            auth=auth,
        )
        assert res.status_code == 400
        fields = {d["field"] for d in res.json()["error"]["details"]}
        assert fields == {"body.type", "body.status"}

    stored = await any_storage.incidents.get(incident["id"])
    assert stored["type"] == "medical"
    assert stored["status"] == "new"


async def test_null_clears_optional_field(any_client, as_user):
    auth = as_user("911 Dispatcher")
    incident = await _create(any_client, auth, "/api/incidents", {**INCIDENT, "comments": "x"})
    res = await any_client.patch(
        f"/api/incidents/{incident['id']}", json={"comments": None}, auth=auth,
    )
    assert res.status_code == 200
    assert res.json()["comments"] is None
    assert res.json()["type"] == "medical"
