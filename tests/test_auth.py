"""Integration tests for sign in and the admin guard."""

import pytest

from cbody_ops.config.database import db


pytestmark = pytest.mark.integration


class TestLogin:

    def test_admin_signs_in(self, client, admins):
        response = client.post("/auth/login", json={"email": "admin-id@example.com", "password": "secret-pass"})

        assert response.status_code == 200
        body = response.get_json()
        assert body["ok"] is True
        assert body["data"]["access_token"] == "token-admin-id"
        assert body["data"]["admin"]["role"] == "admin"

    def test_wrong_password(self, client, admins):
        response = client.post("/auth/login", json={"email": "admin-id@example.com", "password": "nope-nope"})

        assert response.status_code == 401
        assert response.get_json()["ok"] is False

    def test_non_admin_is_refused(self, client, admins, auth_client):
        auth_client.issue_token("customer-1", password="secret-pass")

        response = client.post("/auth/login", json={"email": "customer-1@example.com", "password": "secret-pass"})

        assert response.status_code == 403
        assert response.get_json()["error_code"] == "NOT_ADMIN"

    def test_invalid_email(self, client):
        response = client.post("/auth/login", json={"email": "nobody", "password": "x"})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "VALIDATION_ERROR"


class TestGuard:

    def test_missing_token(self, client, admins):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.get_json() == {
            "ok": False,
            "error_code": "UNAUTHORIZED",
            "error": "Authorization token is required.",
        }

    def test_unknown_token(self, client, admins):
        response = client.get("/auth/me", headers={"Authorization": "Bearer forged"})

        assert response.status_code == 401

    def test_me_returns_profile(self, client, headers):
        response = client.get("/auth/me", headers=headers("support"))

        assert response.status_code == 200
        assert response.get_json()["data"]["id"] == "support-id"

    def test_disabled_admin(self, client, admins, headers):
        admins["support"].is_active = False
        db.session.commit()

        response = client.get("/auth/me", headers=headers("support"))

        assert response.status_code == 403
        assert response.get_json()["error_code"] == "ADMIN_DISABLED"

    @pytest.mark.parametrize("role, expected", [
        ("superadmin", 200),
        ("admin", 403),
        ("finance", 403),
        ("support", 403),
    ])
    def test_admin_management_is_superadmin_only(self, client, headers, role, expected):
        response = client.get("/admins/", headers=headers(role))

        assert response.status_code == expected
        if expected == 403:
            assert response.get_json()["error_code"] == "INSUFFICIENT_ROLE"

    @pytest.mark.parametrize("role, expected", [
        ("superadmin", 200),
        ("admin", 200),
        ("finance", 200),
        ("support", 403),
    ])
    def test_finance_roles(self, client, headers, role, expected):
        response = client.get("/finance/accounts", headers=headers(role))

        assert response.status_code == expected
