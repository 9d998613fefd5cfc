"""Integration tests for customer management."""

from datetime import datetime, timedelta, timezone

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import AdminOperationLog, UserLoginEvent, UserProfile


pytestmark = pytest.mark.integration


class TestListUsers:

    def test_search_and_last_login(self, client, headers, seed):
        alice = seed.user(username="alice")
        seed.user(username="bob")
        seen = datetime(2025, 5, 1, 8, 0, tzinfo=timezone.utc)
        seed.add(UserLoginEvent(user_id=alice.id, ip_address="1.1.1.1", logged_at=seen - timedelta(days=1)))
        seed.add(UserLoginEvent(user_id=alice.id, ip_address="1.1.1.2", logged_at=seen))

        response = client.get("/users/?search=ali", headers=headers("support"))

        data = response.get_json()["data"]
        assert [user["username"] for user in data["users"]] == ["alice"]
        assert data["users"][0]["last_login_at"] == "2025-05-01T08:00:00+00:00"
        assert data["pagination"]["total"] == 1

    def test_detail_has_recent_logins(self, client, headers, seed):
        user = seed.user()
        seed.add(UserLoginEvent(user_id=user.id, ip_address="9.9.9.9", logged_at=datetime.now(timezone.utc)))

        response = client.get(f"/users/{user.id}", headers=headers("finance"))

        assert response.get_json()["data"]["recent_logins"][0]["ip_address"] == "9.9.9.9"

    def test_unknown_user(self, client, headers):
        assert client.get("/users/missing", headers=headers()).status_code == 404


class TestUpdateUser:

    def test_only_changed_fields_are_written_and_audited(self, client, headers, seed):
        user = seed.user(username="carol", level=2)

        response = client.patch(
            f"/users/{user.id}",
            json={"username": "carol", "level": 5, "language_code": "th"},
            headers=headers(),
        )

        assert response.status_code == 200
        assert response.get_json()["data"]["changed"] == ["language_code", "level"]

        log = AdminOperationLog.query.filter_by(operation_type="update_user_profile").one()
        assert log.target_admin_id == user.id
        assert log.operation_details["changes"] == {"level": 5, "language_code": "th"}
        assert log.operation_details["previous_values"] == {"level": 2, "language_code": "en"}

    def test_nothing_changed_writes_no_log(self, client, headers, seed):
        user = seed.user(username="dave")

        response = client.patch(f"/users/{user.id}", json={"username": "dave"}, headers=headers())

        assert response.get_json()["data"]["changed"] == []
        assert AdminOperationLog.query.count() == 0

    @pytest.mark.parametrize("payload", [
        {},
        {"level": 11},
        {"credit_score": -1},
        {"language_code": "fr"},
        {"is_banned": "yes"},
        {"display_name": ""},
    ])
    def test_rejects_invalid_updates(self, client, headers, seed, payload):
        user = seed.user()

        response = client.patch(f"/users/{user.id}", json=payload, headers=headers())

        assert response.status_code == 400

    def test_admin_cannot_edit(self, client, headers, seed):
        user = seed.user()

        response = client.patch(f"/users/{user.id}", json={"level": 3}, headers=headers("admin"))

        assert response.status_code == 403


class TestBanAndPassword:

    def test_toggle_ban(self, client, headers, seed):
        user = seed.user()

        response = client.post(f"/users/{user.id}/toggle-ban", json={"reason": "spam"}, headers=headers())

        assert response.get_json()["data"]["is_banned"] is True
        db.session.expire_all()
        assert db.session.get(UserProfile, user.id).is_banned is True

        log = AdminOperationLog.query.filter_by(operation_type="toggle_user_ban").one()
        assert log.operation_details["reason"] == "spam"

    def test_ban_reason_too_long(self, client, headers, seed):
        user = seed.user()

        response = client.post(f"/users/{user.id}/toggle-ban", json={"reason": "x" * 201}, headers=headers())

        assert response.status_code == 400

    def test_reset_password(self, client, headers, seed, auth_client):
        user = seed.user()

        response = client.post(f"/users/{user.id}/reset-password", json={"new_password": "abcdefgh"}, headers=headers())

        assert response.status_code == 200
        assert auth_client.updated == [(user.id, {"password": "abcdefgh"})]
