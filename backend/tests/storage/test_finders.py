"""Storage Finders - verifies the per-entity lookups built on find_by/search."""

from datetime import datetime, timedelta, timezone


async def test_user_lookups(storage):
    await storage.users.create({"username": "a", "password": "x", "chip_card_id": "CHIP-1"})
    assert (await storage.get_user_by_username("a"))["chip_card_id"] == "CHIP-1"
    assert (await storage.get_user_by_chip_card("CHIP-1"))["username"] == "a"
    assert await storage.get_user_by_username("missing") is None


async def test_incident_units_and_unit_assignments(storage):
    await storage.incident_units.create({"incident_id": 1, "unit_id": 5})
    await storage.incident_units.create({"incident_id": 2, "unit_id": 5})
    await storage.incident_units.create({"incident_id": 1, "unit_id": 6})
    assert [a["unit_id"] for a in await storage.get_incident_units(1)] == [5, 6]
    assert [a["incident_id"] for a in await storage.get_unit_assignments(5)] == [1, 2]


async def test_call_logs_newest_entry_first(storage):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for offset in (0, 2, 1):
        await storage.call_entry_logs.create({
            "incident_id": 3, "call_taker_name": "Jo", "auth_method": "pin",
            "session_id": f"s{offset}", "entry_time": base + timedelta(minutes=offset),
        })
    logs = await storage.get_call_entry_logs_for_incident(3)
    assert [log["session_id"] for log in logs] == ["s2", "s1", "s0"]


async def test_animal_owner_search_is_case_insensitive(storage):
    await storage.animals.create({
        "species": "dog", "health_status": "healthy", "owner_name": "Martha Stewart",
    })
    await storage.animals.create({"species": "cat", "health_status": "healthy"})
    matches = await storage.find_animals_by_owner("stew")
    assert len(matches) == 1
    assert matches[0]["species"] == "dog"


async def test_customer_search_spans_fields(storage):
    await storage.customers.create({
        "first_name": "Ada", "last_name": "Byron", "email": "ada@example.org",
    })
    await storage.customers.create({
        "first_name": "Alan", "last_name": "Turing", "home_phone": "555-0199",
    })
    assert [c["last_name"] for c in await storage.search_customers("EXAMPLE")] == ["Byron"]
    assert [c["last_name"] for c in await storage.search_customers("0199")] == ["Turing"]
    assert len(await storage.search_customers("CUS-")) == 2


async def test_customer_search_treats_wildcards_literally(storage):
    await storage.customers.create({"first_name": "Ada", "last_name": "Byron"})
    assert await storage.search_customers("%") == []


async def test_risk_event_listing_newest_first(storage):
    for day in (1, 3, 2):
        await storage.risk_events.create({
            "risk_assessment_id": 1, "event_type": "drill", "title": f"d{day}",
            "description": "x", "event_date": datetime(2025, 1, day, tzinfo=timezone.utc),
        })
    assert [e["title"] for e in await storage.get_risk_events(1)] == ["d3", "d2", "d1"]


async def test_dmv_lookups(storage):
    owner = await storage.characters.create({
        "sync_id": "char-1", "first_name": "Sam", "last_name": "Lee",
    })
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)
    await storage.licenses.create({
        "owner": "char-1", "character_id": owner["id"],
        "license_number": "D1234", "expiration": expires,
    })
    await storage.vehicle_registrations.create({
        "owner": "char-1", "character_id": owner["id"], "vehicle_type": "car",
        "make": "Ford", "model": "F150", "year": "2020", "color": "red",
        "plate": "ABC123", "vin": "1FTEX", "expiration": expires,
    })
    assert (await storage.get_character_by_sync_id("char-1"))["id"] == owner["id"]
    assert (await storage.get_license_by_number("D1234"))["type"] == "DRIVERS"
    assert (await storage.get_vehicle_by_plate("ABC123"))["vin"] == "1FTEX"
    assert (await storage.get_vehicle_by_vin("1FTEX"))["plate"] == "ABC123"
    assert len(await storage.get_licenses_for_character(owner["id"])) == 1
    assert len(await storage.get_vehicles_for_character(owner["id"])) == 1
    assert await storage.get_vehicle_by_plate("NOPE") is None


async def test_health_check(storage):
    assert await storage.health_check() is True
