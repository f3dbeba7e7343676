"""
HTTP surface: sign-in, the response envelope, and one full booking from
creation to the daily report.
"""
from datetime import datetime, timedelta

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from letsgo.core.dependencies import get_booking_service, get_db, get_report_service
from letsgo.main import app
from letsgo.repositories.sql import SqlAlchemyBookingRepository
from letsgo.services.booking_service import BookingService
from letsgo.services.report_service import ReportService

T0 = datetime(2026, 10, 19, 9, 0)


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return Clock(T0)


@pytest.fixture
def client(session_factory, seeded, clock):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    def override_booking_service(db=Depends(get_db)):
        return BookingService(SqlAlchemyBookingRepository(db), clock=clock)

    def override_report_service(db=Depends(get_db)):
        return ReportService(SqlAlchemyBookingRepository(db), clock=clock)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_booking_service] = override_booking_service
    app.dependency_overrides[get_report_service] = override_report_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def headers(client):
    response = client.post(
        "/auth/login", json={"email": "desk@letsgo.com", "password": "desk-pass"}
    )
    assert response.status_code == 200
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


def create_open_booking(client, headers, seeded, room_key="room_id"):
    return client.post(
        "/bookings/",
        headers=headers,
        json={
            "room_id": seeded[room_key],
            "customer_id": seeded["customer_id"],
            "type": "open",
            "start_time": T0.isoformat(),
        },
    )


class TestAuthentication:
    def test_root_is_public(self, client):
        assert client.get("/").json()["success"] is True

    def test_login_returns_the_staff_member(self, client, seeded):
        response = client.post(
            "/auth/login", json={"email": "desk@letsgo.com", "password": "desk-pass"}
        )

        body = response.json()
        assert body["success"] is True
        assert body["data"]["token_type"] == "bearer"
        assert body["data"]["user"]["id"] == seeded["user_id"]
        assert body["data"]["user"]["role"] == "employee"

    def test_wrong_password(self, client):
        response = client.post(
            "/auth/login", json={"email": "desk@letsgo.com", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Invalid email or password"}

    def test_me(self, client, headers):
        body = client.get("/auth/me", headers=headers).json()
        assert body["data"]["email"] == "desk@letsgo.com"

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/auth/me"),
            ("get", "/bookings/"),
            ("post", "/bookings/1/end"),
            ("delete", "/drink-orders/1"),
            ("get", "/reports/daily"),
        ],
    )
    def test_requests_without_a_token_are_rejected(self, client, method, path):
        response = getattr(client, method)(path)

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Not signed in"}

    def test_garbage_token_is_rejected(self, client):
        response = client.get("/bookings/", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401


class TestBookingFlow:
    def test_full_booking(self, client, headers, seeded, clock):
        created = create_open_booking(client, headers, seeded)
        assert created.status_code == 201
        booking = created.json()["data"]
        assert booking["status"] == "active"
        assert booking["room"]["status"] == "occupied"
        assert booking["user"]["id"] == seeded["user_id"]
        assert booking["total_cost"] == 0

        coffee = client.post(
            f"/bookings/{booking['id']}/drinks",
            headers=headers,
            json={"drink_id": seeded["coffee_id"], "quantity": 2},
        )
        assert coffee.status_code == 201
        assert coffee.json()["data"]["total_price"] == 30.0
        assert coffee.json()["data"]["drink"]["name"] == "Arabic Coffee"

        client.post(
            f"/bookings/{booking['id']}/drinks",
            headers=headers,
            json={"drink_id": seeded["juice_id"], "quantity": 1},
        )
        detail = client.get(f"/bookings/{booking['id']}", headers=headers).json()["data"]
        assert detail["drinks_cost"] == 50.0
        assert len(detail["drink_orders"]) == 2

        removed = client.delete(f"/drink-orders/{coffee.json()['data']['id']}", headers=headers)
        assert removed.json()["success"] is True

        clock.now = T0 + timedelta(minutes=90)
        ended = client.post(f"/bookings/{booking['id']}/end", headers=headers)

        assert ended.status_code == 200
        data = ended.json()["data"]
        assert data["status"] == "completed"
        assert data["room_cost"] == 150.0
        assert data["drinks_cost"] == 20.0
        assert data["total_cost"] == 170.0
        assert data["room"]["status"] == "available"

    def test_fixed_booking_is_quoted_up_front(self, client, headers, seeded):
        response = client.post(
            "/bookings/",
            headers=headers,
            json={
                "room_id": seeded["cheap_room_id"],
                "customer_id": seeded["customer_id"],
                "type": "fixed",
                "start_time": T0.isoformat(),
                "end_time": (T0 + timedelta(minutes=60)).isoformat(),
            },
        )

        assert response.status_code == 201
        assert response.json()["data"]["room_cost"] == 50.0
        assert response.json()["data"]["total_cost"] == 50.0

    def test_costs_are_rounded_to_cents_in_json(self, client, headers, seeded, clock):
        booking = create_open_booking(client, headers, seeded).json()["data"]
        clock.now = T0 + timedelta(minutes=10)

        data = client.post(f"/bookings/{booking['id']}/end", headers=headers).json()["data"]

        assert data["room_cost"] == 16.67

    def test_occupied_room_is_a_conflict(self, client, headers, seeded):
        create_open_booking(client, headers, seeded)

        response = create_open_booking(client, headers, seeded)

        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "Room is currently occupied"}
        listing = client.get("/bookings/", headers=headers).json()["data"]
        assert len(listing) == 1

    def test_fixed_booking_without_end_time(self, client, headers, seeded):
        response = client.post(
            "/bookings/",
            headers=headers,
            json={
                "room_id": seeded["room_id"],
                "customer_id": seeded["customer_id"],
                "type": "fixed",
                "start_time": T0.isoformat(),
            },
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "A fixed booking needs an end time"}

    def test_unknown_booking(self, client, headers):
        response = client.get("/bookings/999", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"] == "Booking not found"

    def test_malformed_quantity(self, client, headers, seeded):
        booking = create_open_booking(client, headers, seeded).json()["data"]

        response = client.post(
            f"/bookings/{booking['id']}/drinks",
            headers=headers,
            json={"drink_id": seeded["coffee_id"], "quantity": "a few"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "quantity" in body["error"]

    def test_ending_twice(self, client, headers, seeded, clock):
        booking = create_open_booking(client, headers, seeded).json()["data"]
        clock.now = T0 + timedelta(hours=1)
        client.post(f"/bookings/{booking['id']}/end", headers=headers)

        response = client.post(f"/bookings/{booking['id']}/end", headers=headers)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Booking is already completed"}

    def test_list_by_status(self, client, headers, seeded, clock):
        first = create_open_booking(client, headers, seeded).json()["data"]
        create_open_booking(client, headers, seeded, room_key="cheap_room_id")
        clock.now = T0 + timedelta(minutes=30)
        client.post(f"/bookings/{first['id']}/end", headers=headers)

        active = client.get("/bookings/", params={"status": "active"}, headers=headers).json()
        completed = client.get(
            "/bookings/", params={"status": "completed"}, headers=headers
        ).json()

        assert [b["room"]["id"] for b in active["data"]] == [seeded["cheap_room_id"]]
        assert [b["id"] for b in completed["data"]] == [first["id"]]


class TestDailyReport:
    def test_empty_day(self, client, headers, seeded):
        create_open_booking(client, headers, seeded)

        body = client.get("/reports/daily", headers=headers).json()

        assert body["success"] is True
        assert body["data"]["report_date"] == T0.date().isoformat()
        assert body["data"]["stats"] == {
            "active_bookings": 1,
            "available_rooms": 1,
            "occupied_rooms": 1,
            "today_income": 0.0,
            "total_customers": 1,
        }
        assert body["data"]["today_bookings"] == []

    def test_income_from_bookings_completed_today(self, client, headers, seeded, clock):
        booking = create_open_booking(client, headers, seeded).json()["data"]
        clock.now = T0 + timedelta(minutes=90)
        client.post(f"/bookings/{booking['id']}/end", headers=headers)

        body = client.get("/reports/daily", headers=headers).json()["data"]

        assert body["stats"]["today_income"] == 150.0
        assert body["stats"]["active_bookings"] == 0
        assert [b["id"] for b in body["today_bookings"]] == [booking["id"]]
        assert body["today_bookings"][0]["customer"]["name"] == "Sara Khaled"
