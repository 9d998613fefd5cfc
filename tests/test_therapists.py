"""Integration tests for therapist monitoring and actions."""

from datetime import datetime, timedelta, timezone

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import Girl, GirlStatus, GirlWorkSession


pytestmark = pytest.mark.integration


@pytest.fixture
def roster(seed):
    """available, busy, offline, no status row, and a blocked one."""
    return {
        "available": seed.girl(status="available"),
        "busy": seed.girl(status="busy"),
        "offline": seed.girl(status="offline"),
        "unknown": seed.girl(),
        "blocked": seed.girl(status="available", is_blocked=True),
    }


class TestStats:

    def test_counts_by_status(self, client, headers, roster, seed):
        seed.add(GirlWorkSession(girl_id=roster["busy"].id, started_at=datetime.now(timezone.utc) - timedelta(minutes=30)))

        data = client.get("/therapists/stats", headers=headers("support")).get_json()["data"]

        assert data["online"] == 1
        assert data["busy"] == 1
        assert data["offline"] == 2
        assert data["total"] == 4
        assert data["online_today"] == 1
        assert data["today_online_rate"] == 25


class TestMonitoring:

    def test_defaults_to_available_and_busy(self, client, headers, roster, seed):
        seed.order(roster["busy"], seed.user(), status="in_service")

        data = client.get("/therapists/monitoring", headers=headers()).get_json()["data"]

        statuses = [girl["status"] for girl in data["girls"]]
        assert statuses == ["available", "busy"]
        busy = data["girls"][1]
        assert busy["current_order"]["status"] == "in_service"

    def test_offline_includes_missing_status(self, client, headers, roster):
        data = client.get("/therapists/monitoring?status=offline", headers=headers()).get_json()["data"]

        assert {girl["id"] for girl in data["girls"]} == {roster["offline"].id, roster["unknown"].id}

    def test_search_by_number(self, client, headers, roster):
        number = roster["available"].girl_number

        data = client.get(f"/therapists/monitoring?search={number}", headers=headers()).get_json()["data"]

        assert [girl["id"] for girl in data["girls"]] == [roster["available"].id]


class TestCooldown:

    def test_set_cooldown_takes_therapist_offline(self, client, headers, roster):
        girl = roster["available"]

        response = client.post(f"/therapists/{girl.id}/cooldown", json={"hours": 5}, headers=headers("admin"))

        assert response.status_code == 200
        db.session.expire_all()
        status = db.session.get(GirlStatus, girl.id)
        assert status.status == "offline"
        assert status.cooldown_until_at is not None

        abnormal = client.get("/therapists/monitoring?only_abnormal=true", headers=headers()).get_json()["data"]
        assert [item["id"] for item in abnormal["girls"]] == [girl.id]
        assert abnormal["girls"][0]["in_cooldown"] is True

    @pytest.mark.parametrize("hours", [0, -1, 73, "5", True])
    def test_invalid_hours(self, client, headers, roster, hours):
        response = client.post(f"/therapists/{roster['available'].id}/cooldown", json={"hours": hours}, headers=headers())

        assert response.status_code == 400

    def test_support_cannot_set_cooldown(self, client, headers, roster):
        response = client.post(f"/therapists/{roster['available'].id}/cooldown", json={"hours": 1}, headers=headers("support"))

        assert response.status_code == 403

    def test_cancel_cooldown(self, client, headers, roster):
        girl = roster["offline"]
        client.post(f"/therapists/{girl.id}/cooldown", json={"hours": 1}, headers=headers())

        response = client.delete(f"/therapists/{girl.id}/cooldown", headers=headers())

        assert response.status_code == 200
        db.session.expire_all()
        assert db.session.get(GirlStatus, girl.id).cooldown_until_at is None


class TestFlags:

    def test_blocking_forces_offline(self, client, headers, roster):
        girl = roster["available"]

        response = client.post(f"/therapists/{girl.id}/toggle-blocked", headers=headers())

        assert response.get_json()["data"]["is_blocked"] is True
        db.session.expire_all()
        assert db.session.get(GirlStatus, girl.id).status == "offline"

    def test_toggle_verified(self, client, headers, roster):
        girl = roster["busy"]

        client.post(f"/therapists/{girl.id}/toggle-verified", headers=headers())

        db.session.expire_all()
        assert db.session.get(Girl, girl.id).is_verified is False

    def test_unknown_therapist(self, client, headers):
        assert client.post("/therapists/missing/toggle-blocked", headers=headers()).status_code == 404


class TestWorkStats:

    def test_closed_and_open_sessions(self, client, headers, roster, seed):
        girl = roster["available"]
        now = datetime.now(timezone.utc)
        seed.add(GirlWorkSession(girl_id=girl.id, started_at=now - timedelta(days=10, hours=3), ended_at=now - timedelta(days=10)))
        seed.add(GirlWorkSession(girl_id=girl.id, started_at=now - timedelta(days=2, hours=2), ended_at=now - timedelta(days=2)))

        data = client.get(f"/therapists/{girl.id}/work-stats", headers=headers()).get_json()["data"]

        assert data["week_hours"] == 2.0
        assert data["month_hours"] == 5.0
        assert data["total_hours"] == 5.0
        assert data["sessions"] == 2
