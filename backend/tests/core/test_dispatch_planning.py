"""Dispatch Workflows - verifies assignment and release planning.

Tests:
    - Assigning to a "new" incident dispatches it; other statuses are left alone
    - Release collects units from open assignments and from assigned_incident_id
    - A unit reassigned to another incident is left dispatched
    - Completed assignments are not closed again
"""

from beavernet.core.dispatch import (
    UNIT_RELEASE_PATCH, open_assignments, plan_assignment, plan_release,
    triggers_release,
)


def test_assignment_dispatches_new_incident():
    plan = plan_assignment({"id": 4, "status": "new"}, {"id": 9})
    assert plan.assignment == {"incident_id": 4, "unit_id": 9, "status": "assigned"}
    assert plan.unit_patch == {"status": "dispatched", "assigned_incident_id": 4}
    assert plan.incident_patch == {"status": "dispatched"}


def test_assignment_leaves_active_incident_status():
    plan = plan_assignment({"id": 4, "status": "active"}, {"id": 9})
    assert plan.incident_patch is None


def test_only_resolved_triggers_release():
    assert triggers_release("resolved")
    assert not triggers_release("active")


def test_release_merges_both_ties_without_duplicates():
    assignments = [
        {"id": 1, "incident_id": 4, "unit_id": 9, "status": "assigned"},
        {"id": 2, "incident_id": 4, "unit_id": 10, "status": "completed"},
        {"id": 3, "incident_id": 5, "unit_id": 11, "status": "assigned"},
    ]
    units = [
        {"id": 9, "assigned_incident_id": 4},
        {"id": 12, "assigned_incident_id": 4},
        {"id": 10, "assigned_incident_id": None},
        {"id": 9, "assigned_incident_id": 4},
    ]
    plan = plan_release(4, assignments, units)
    assert plan.unit_ids == [9, 12]
    assert plan.assignment_ids == [1]


def test_release_skips_unit_moved_to_another_incident():
    assignments = [
        {"id": 1, "incident_id": 4, "unit_id": 9, "status": "assigned"},
        {"id": 2, "incident_id": 4, "unit_id": 10, "status": "arrived"},
    ]
    units = [
        {"id": 9, "assigned_incident_id": 5},
        {"id": 10, "assigned_incident_id": None},
    ]
    plan = plan_release(4, assignments, units)
    assert plan.unit_ids == [10]
    assert plan.assignment_ids == [1, 2]


def test_open_assignments_drop_completed_and_foreign():
    assignments = [
        {"id": 1, "incident_id": 4, "unit_id": 9, "status": "enroute"},
        {"id": 2, "incident_id": 4, "unit_id": 9, "status": "completed"},
        {"id": 3, "incident_id": 6, "unit_id": 9, "status": "assigned"},
    ]
    assert [a["id"] for a in open_assignments(4, assignments)] == [1]


def test_release_with_nothing_tied():
    plan = plan_release(4, [], [])
    assert plan.unit_ids == []
    assert plan.assignment_ids == []


def test_release_patch_clears_incident():
    assert UNIT_RELEASE_PATCH == {"status": "available", "assigned_incident_id": None}
