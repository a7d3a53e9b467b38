"""Tests for registrations, contact form and newsletter signups."""

from datetime import datetime

import pytest

from app.models.sessions import ClassSession


@pytest.fixture
def class_session(db_session):
    session = ClassSession(
        location_name="Washington Park",
        day_of_week="Tuesday",
        time="10:00 AM",
        start_date=datetime(2026, 3, 3),
        end_date=datetime(2026, 5, 12),
    )
    db_session.add(session)
    db_session.commit()
    return session


class TestRegistrations:

    def test_register(self, client, class_session):
        response = client.post("/api/registrations", json={
            "sessionId": class_session.id,
            "parentName": "Loretta Lynn",
            "parentEmail": "loretta@example.com",
            "studentName": "Betty",
            "studentAge": 3,
        })
        assert response.status_code == 201
        assert response.json()["paymentStatus"] == "Pending"

    def test_unknown_session(self, client):
        response = client.post("/api/registrations", json={
            "sessionId": 42,
            "parentName": "Loretta Lynn",
            "parentEmail": "loretta@example.com",
            "studentName": "Betty",
            "studentAge": 3,
        })
        assert response.status_code == 404

    def test_admin_can_list_and_delete(self, admin_client, class_session):
        created = admin_client.post("/api/registrations", json={
            "sessionId": class_session.id,
            "parentName": "Loretta Lynn",
            "parentEmail": "loretta@example.com",
            "studentName": "Betty",
            "studentAge": 3,
        }).json()
        assert [r["id"] for r in admin_client.get("/api/admin/registrations").json()] == [created["id"]]
        assert admin_client.delete(f"/api/admin/registrations/{created['id']}").json() == {"success": True}
        assert admin_client.get("/api/admin/registrations").json() == []


class TestContact:

    def test_submit(self, admin_client):
        response = admin_client.post("/api/contact", json={
            "name": "Dolly",
            "email": "dolly@example.com",
            "inquiryType": "Birthday Party",
            "message": "Do you do parties on Sundays?",
        })
        assert response.status_code == 201
        assert response.json()["phone"] is None
        assert admin_client.get("/api/admin/contact").json()[0]["inquiryType"] == "Birthday Party"

    def test_submissions_are_not_editable(self, admin_client):
        assert admin_client.put("/api/admin/contact/1", json={}).status_code == 405


class TestNewsletter:

    def test_subscribe(self, client):
        response = client.post("/api/newsletter", json={"email": "fan@example.com"})
        assert response.status_code == 201
        assert response.json()["email"] == "fan@example.com"

    @pytest.mark.parametrize("payload", [{}, {"email": ""}, {"email": "not-an-email"}])
    def test_invalid_email(self, client, payload):
        assert client.post("/api/newsletter", json=payload).status_code == 400

    def test_already_subscribed(self, client):
        client.post("/api/newsletter", json={"email": "fan@example.com"})
        response = client.post("/api/newsletter", json={"email": "fan@example.com"})
        assert response.status_code == 409
        assert response.json() == {"error": "Email already subscribed", "alreadySubscribed": True}
