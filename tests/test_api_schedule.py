from httpx import AsyncClient

from .factories import build_employee_create


async def test_schedule_endpoint(api_client: AsyncClient) -> None:
    payload = build_employee_create(
        name="Anna Becker", fixed_cashier_slots=[{"weekday": 1, "shift_id": "W-1"}]
    ).model_dump(by_alias=True, mode="json")
    await api_client.post("/api/employees/", json=payload)

    response = await api_client.get("/api/schedule", params={"month": "2024-05"})
    assert response.status_code == 200
    schedule = response.json()

    assert schedule["monthKey"] == "2024-05"
    assert schedule["monthLabel"] == "Mai 2024"
    assert len(schedule["days"]) == 31
    assert schedule["summary"]["totalCashierShifts"] == 93

    monday = next(day for day in schedule["days"] if day["dateISO"] == "2024-05-06")
    early = monday["shifts"][0]
    assert early["status"] == "ASSIGNED"
    assert early["employee"]["name"] == "Anna Becker"
    assert early["note"] == "Feste Zuordnung"


async def test_schedule_endpoint_falls_back_on_invalid_month(api_client: AsyncClient) -> None:
    response = await api_client.get("/api/schedule", params={"month": "2024-13"})
    assert response.status_code == 200
    schedule = response.json()

    assert len(schedule["monthKey"]) == 7
    assert schedule["warnings"][-1].startswith("Es sind keine Mitarbeitenden angelegt")


async def test_cashier_options_and_health(api_client: AsyncClient) -> None:
    options = await api_client.get("/api/shifts/cashier-options")
    assert options.status_code == 200
    assert [option["id"] for option in options.json()] == ["W-1", "W-2", "W-3", "WE-1", "WE-2", "WE-3"]

    health = await api_client.get("/health")
    assert health.json() == {"status": "ok"}
