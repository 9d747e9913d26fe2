import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from booking_engine.api.dependencies import _in_memory_bundle, get_clock, get_notification_breaker
from booking_engine.main import app
from tests.conftest import (
    CUSTOMER_ID,
    ITEM_OFFER_ID,
    OTHER_USER_ID,
    OWNER_ID,
    SERVICE_OFFER_ID,
    seed_offers,
    seed_users,
)


@pytest_asyncio.fixture
async def client(clock):
    _in_memory_bundle.cache_clear()
    get_notification_breaker.cache_clear()
    bundle = _in_memory_bundle()
    seed_offers(bundle["offer_repo"])
    seed_users(bundle["user_directory"])
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    _in_memory_bundle.cache_clear()


def as_user(user_id: int) -> dict:
    return {"X-User-Id": str(user_id)}


async def _create_booking(client, user_id=CUSTOMER_ID, start="2026-03-03", end="2026-03-05"):
    return await client.post(
        f"/api/v1/bookings/offers/{ITEM_OFFER_ID}",
        json={
            "start_date": start,
            "end_date": end,
            "terms_accepted": True,
            "withdrawal_right_acknowledged": True,
        },
        headers=as_user(user_id),
    )


async def test_health(client):
    assert (await client.get("/health")).json() == {"status": "ok", "service": "booking-engine"}
    db = await client.get("/health/db")
    assert db.status_code == 200
    assert db.json()["mode"] == "in_memory"


async def test_availability_and_price(client):
    availability = await client.get(
        f"/api/v1/bookings/availability/{ITEM_OFFER_ID}",
        params={"start_date": "2026-03-03", "end_date": "2026-03-05"},
    )
    price = await client.get(
        f"/api/v1/bookings/price/{SERVICE_OFFER_ID}",
        params={"start_date": "2026-03-03", "end_date": "2026-03-04"},
    )

    assert availability.status_code == 200
    assert availability.json()["is_available"] is True
    assert availability.json()["available_dates"] == ["2026-03-03", "2026-03-04", "2026-03-05"]
    assert price.status_code == 200
    assert price.json()["days_count"] == 2
    assert float(price.json()["total_price"]) == 80.0


@pytest.mark.parametrize("bad", ["03.03.2026", "2026-02-30", "soon"])
async def test_malformed_date_is_400(client, bad):
    response = await client.get(
        f"/api/v1/bookings/availability/{ITEM_OFFER_ID}",
        params={"start_date": bad, "end_date": "2026-03-05"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid date format. Use YYYY-MM-DD."


async def test_create_booking_and_read_it_back(client):
    created = await _create_booking(client)

    assert created.status_code == 201
    body = created.json()
    assert body["success"] is True
    assert body["booking"]["status"] == "CONFIRMED"
    assert float(body["booking"]["total_price"]) == 45.0
    booking_id = body["booking"]["id"]

    mine = await client.get("/api/v1/bookings/my-bookings", headers=as_user(CUSTOMER_ID))
    services = await client.get("/api/v1/bookings/my-services", headers=as_user(OWNER_ID))
    single = await client.get(f"/api/v1/bookings/{booking_id}", headers=as_user(OWNER_ID))
    stranger = await client.get(f"/api/v1/bookings/{booking_id}", headers=as_user(OTHER_USER_ID))
    booked = await client.get(f"/api/v1/bookings/offers/{ITEM_OFFER_ID}/booked-dates")

    assert [b["id"] for b in mine.json()] == [booking_id]
    assert [b["id"] for b in services.json()] == [booking_id]
    assert single.status_code == 200
    assert stranger.status_code == 403
    assert booked.json()["booked_dates"] == ["2026-03-03", "2026-03-04", "2026-03-05"]


async def test_booking_requires_user_header(client):
    response = await client.post(
        f"/api/v1/bookings/offers/{ITEM_OFFER_ID}",
        json={"start_date": "2026-03-03", "end_date": "2026-03-05"},
    )
    assert response.status_code == 401


async def test_rejected_booking_is_400_with_message(client):
    await _create_booking(client)
    clash = await _create_booking(client, user_id=OTHER_USER_ID, start="2026-03-05", end="2026-03-06")
    no_terms = await client.post(
        f"/api/v1/bookings/offers/{ITEM_OFFER_ID}",
        json={"start_date": "2026-03-10", "end_date": "2026-03-11"},
        headers=as_user(CUSTOMER_ID),
    )

    assert clash.status_code == 400
    assert clash.json()["error_message"] == "Selected period is not available."
    assert no_terms.status_code == 400
    assert no_terms.json()["error_code"] == "VALIDATION_ERROR"


async def test_cancel_booking(client):
    booking_id = (await _create_booking(client)).json()["booking"]["id"]

    forbidden = await client.post(
        f"/api/v1/bookings/{booking_id}/cancel", json={"reason": "x"}, headers=as_user(CUSTOMER_ID)
    )
    cancelled = await client.post(
        f"/api/v1/bookings/{booking_id}/cancel", json={"reason": "Broken"}, headers=as_user(OWNER_ID)
    )
    missing = await client.post("/api/v1/bookings/999/cancel", headers=as_user(OWNER_ID))

    assert forbidden.status_code == 403
    assert cancelled.status_code == 200
    assert cancelled.json()["booking"]["status"] == "CANCELLED"
    assert missing.status_code == 404


async def test_block_and_unblock_dates(client):
    blocked = await client.post(
        f"/api/v1/bookings/offers/{ITEM_OFFER_ID}/block-dates",
        json={"start_date": "2026-03-10", "end_date": "2026-03-12", "reason": "Holiday"},
        headers=as_user(OWNER_ID),
    )
    not_owner = await client.post(
        f"/api/v1/bookings/offers/{ITEM_OFFER_ID}/block-dates",
        json={"start_date": "2026-03-10", "end_date": "2026-03-12"},
        headers=as_user(CUSTOMER_ID),
    )
    unblocked = await client.delete(
        f"/api/v1/bookings/offers/{ITEM_OFFER_ID}/block-dates",
        params={"start_date": "2026-03-10", "end_date": "2026-03-12"},
        headers=as_user(OWNER_ID),
    )

    assert blocked.status_code == 200
    assert blocked.json()["days"] == 3
    assert not_owner.status_code == 403
    assert unblocked.json()["days"] == 3


async def test_contract_flow(client):
    booking_id = (await _create_booking(client)).json()["booking"]["id"]

    stranger = await client.post(
        "/api/v1/rental-contracts", json={"booking_id": booking_id}, headers=as_user(OTHER_USER_ID)
    )
    created = await client.post(
        "/api/v1/rental-contracts", json={"booking_id": booking_id}, headers=as_user(CUSTOMER_ID)
    )
    assert stranger.status_code == 403
    assert created.status_code == 201
    contract = created.json()
    assert contract["status"] == "DRAFT"
    assert float(contract["deposit_amount"]) == 9.0

    contract_id = contract["id"]
    await client.post(f"/api/v1/rental-contracts/{contract_id}/sign", headers=as_user(OWNER_ID))
    signed = await client.post(f"/api/v1/rental-contracts/{contract_id}/sign", headers=as_user(CUSTOMER_ID))
    twice = await client.post(f"/api/v1/rental-contracts/{contract_id}/sign", headers=as_user(CUSTOMER_ID))
    by_booking = await client.get(
        f"/api/v1/rental-contracts/booking/{booking_id}", headers=as_user(OWNER_ID)
    )
    mine = await client.get("/api/v1/rental-contracts/my-contracts", headers=as_user(CUSTOMER_ID))
    document = await client.get(
        f"/api/v1/rental-contracts/{contract_id}/document", headers=as_user(OWNER_ID)
    )

    assert signed.json()["status"] == "ACTIVE"
    assert twice.status_code == 409
    assert by_booking.json()["id"] == contract_id
    assert [c["id"] for c in mine.json()] == [contract_id]
    assert document.status_code == 200
    assert document.headers["content-type"].startswith("text/html")
    assert f"rental_contract_{contract_id}_20260302.html" in document.headers["content-disposition"]

    cancelled = await client.post(
        f"/api/v1/rental-contracts/{contract_id}/cancel",
        json={"reason": "Plans changed"},
        headers=as_user(CUSTOMER_ID),
    )
    assert cancelled.json()["status"] == "CANCELLED"


async def test_unknown_contract_is_404(client):
    response = await client.get("/api/v1/rental-contracts/999", headers=as_user(OWNER_ID))
    assert response.status_code == 404
    assert response.json()["code"] == "CONTRACT_NOT_FOUND"
