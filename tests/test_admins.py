"""Integration tests for admin management."""

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import AdminProfile, AdminOperationLog


pytestmark = pytest.mark.integration


NEW_ADMIN = {
    "email": "new.admin@example.com",
    "password": "long-enough",
    "display_name": "New Admin",
    "role": "support",
}


class TestCreateAdmin:

    def test_creates_profile_and_logs(self, client, headers, auth_client):
        response = client.post("/admins/", json=NEW_ADMIN, headers=headers())

        assert response.status_code == 201
        created_id = auth_client.created[0]["id"]
        assert response.get_json()["data"]["admin"]["id"] == created_id

        profile = db.session.get(AdminProfile, created_id)
        assert profile.role == "support"
        assert profile.is_active is True

        log = AdminOperationLog.query.filter_by(operation_type="create_admin").one()
        assert log.operator_id == "superadmin-id"
        assert log.target_admin_id == created_id

    def test_auth_user_removed_when_profile_insert_fails(self, client, headers, auth_client, monkeypatch):
        monkeypatch.setattr(auth_client, "admin_create_user", lambda **kwargs: {"id": "admin-id"})

        response = client.post("/admins/", json=NEW_ADMIN, headers=headers())

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "ADMIN_CREATE_FAILED"
        assert auth_client.deleted == ["admin-id"]

    @pytest.mark.parametrize("field, value", [
        ("email", "not-an-email"),
        ("password", "short"),
        ("display_name", "   "),
        ("role", "owner"),
    ])
    def test_rejects_bad_payload(self, client, headers, field, value):
        response = client.post("/admins/", json=dict(NEW_ADMIN, **{field: value}), headers=headers())

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "VALIDATION_ERROR"


class TestManageAdmin:

    def test_cannot_disable_self(self, client, headers):
        response = client.post("/admins/superadmin-id/toggle-status", headers=headers())

        assert response.get_json()["error_code"] == "CANNOT_DISABLE_SELF"
        assert db.session.get(AdminProfile, "superadmin-id").is_active is True

    def test_toggle_status(self, client, headers):
        response = client.post("/admins/support-id/toggle-status", headers=headers())

        assert response.status_code == 200
        db.session.expire_all()
        assert db.session.get(AdminProfile, "support-id").is_active is False

        log = AdminOperationLog.query.filter_by(operation_type="toggle_admin_status").one()
        assert log.operation_details["new_status"] == "inactive"

    def test_rename_records_previous_value(self, client, headers):
        response = client.patch("/admins/finance-id", json={"display_name": "Cashier"}, headers=headers())

        assert response.status_code == 200
        log = AdminOperationLog.query.filter_by(operation_type="update_admin_profile").one()
        assert log.operation_details["changes"] == {"display_name": "Cashier"}
        assert log.operation_details["previous_values"] == {"display_name": "Finance One"}

    def test_reset_password_goes_to_auth_provider(self, client, headers, auth_client):
        response = client.post("/admins/admin-id/reset-password", json={"new_password": "brand-new-pass"}, headers=headers())

        assert response.status_code == 200
        assert auth_client.updated == [("admin-id", {"password": "brand-new-pass"})]

    def test_unknown_admin(self, client, headers):
        response = client.patch("/admins/missing", json={"display_name": "X"}, headers=headers())

        assert response.status_code == 404

    def test_operation_logs_resolve_names(self, client, headers):
        client.post("/admins/support-id/toggle-status", headers=headers())

        response = client.get("/admins/operation-logs", headers=headers())

        log = response.get_json()["data"]["logs"][0]
        assert log["operator_name"] == "Superadmin One"
        assert log["target_name"] == "Support One"
