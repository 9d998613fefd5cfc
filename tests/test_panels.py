"""Integration tests for the partner city panels."""

from datetime import datetime, timedelta, timezone

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import AdminProfile, GirlStatus


pytestmark = pytest.mark.integration


@pytest.fixture
def panel_headers(database, auth_client):
    """Auth headers for the support accounts that own the panels."""
    tokens = {}
    for panel, display_name in (("aloha", "AlohaAdmin"), ("cbody", "cbodyAdmin")):
        profile = AdminProfile(id=f"{panel}-id", display_name=display_name, role="support", is_active=True)
        db.session.add(profile)
        tokens[panel] = {"Authorization": f"Bearer {auth_client.issue_token(profile.id)}"}
    db.session.commit()
    return tokens


@pytest.fixture
def chiang_mai(seed):
    city = seed.city(code="CNX", name={"en": "Chiang Mai"})
    elsewhere = seed.city(code="BKK")
    return city, elsewhere


def status_of(girl):
    db.session.expire_all()
    return db.session.get(GirlStatus, girl.id)


class TestPanelList:

    def test_lists_online_therapists_of_the_city(self, client, panel_headers, seed, chiang_mai):
        city, elsewhere = chiang_mai
        busy = seed.girl(status="busy", city_id=city.id, girl_number=2002)
        available = seed.girl(status="available", city_id=city.id, girl_number=2001)
        seed.girl(status="offline", city_id=city.id)
        seed.girl(city_id=city.id)
        seed.girl(status="available", city_id=city.id, is_blocked=True)
        seed.girl(status="available", city_id=elsewhere.id)

        response = client.get("/panels/aloha/girls", headers=panel_headers["aloha"])
        data = response.get_json()["data"]

        assert response.status_code == 200
        assert data["panel"] == "aloha"
        assert [item["id"] for item in data["girls"]] == [available.id, busy.id]
        assert data["pagination"]["total"] == 2

    def test_cbody_panel_uses_partner_sort_order(self, client, panel_headers, seed):
        home = seed.city()
        partner = seed.girl(status="available", city_id=home.id, sort_order=998)
        seed.girl(status="available", city_id=home.id, sort_order=999)

        data = client.get("/panels/cbody/girls", headers=panel_headers["cbody"]).get_json()["data"]

        assert home.id == 1
        assert [item["id"] for item in data["girls"]] == [partner.id]

    def test_city_missing(self, client, panel_headers):
        response = client.get("/panels/aloha/girls", headers=panel_headers["aloha"])

        assert response.status_code == 404
        assert response.get_json()["ok"] is False

    def test_unknown_panel(self, client, panel_headers):
        response = client.get("/panels/pattaya/girls", headers=panel_headers["aloha"])

        assert response.status_code == 404

    def test_only_the_owning_account(self, client, headers, panel_headers, chiang_mai):
        other_panel = client.get("/panels/aloha/girls", headers=panel_headers["cbody"])
        generic_support = client.get("/panels/aloha/girls", headers=headers("support"))
        superadmin = client.get("/panels/aloha/girls", headers=headers())

        assert other_panel.status_code == 403
        assert other_panel.get_json()["error_code"] == "PANEL_FORBIDDEN"
        assert generic_support.status_code == 403
        assert superadmin.status_code == 403


class TestToggleBusy:

    def test_busy_to_available(self, client, panel_headers, seed, chiang_mai):
        girl = seed.girl(status="busy", city_id=chiang_mai[0].id)
        row = status_of(girl)
        row.next_available_time = datetime.now(timezone.utc) + timedelta(hours=1)
        db.session.commit()

        response = client.post(f"/panels/aloha/girls/{girl.id}/toggle-busy", json={}, headers=panel_headers["aloha"])
        data = response.get_json()["data"]

        assert response.status_code == 200
        assert data["status"] == "available"
        assert data["next_available_time"] is None
        assert status_of(girl).status == "available"

    def test_available_to_busy(self, client, panel_headers, seed, chiang_mai):
        girl = seed.girl(status="available", city_id=chiang_mai[0].id)
        before = datetime.now(timezone.utc)

        response = client.post(
            f"/panels/aloha/girls/{girl.id}/toggle-busy", json={"minutes": 90}, headers=panel_headers["aloha"]
        )

        assert response.status_code == 200
        assert response.get_json()["data"]["status"] == "busy"
        until = status_of(girl).next_available_time
        if until.tzinfo is None:
            until = until.replace(tzinfo=timezone.utc)
        assert before + timedelta(minutes=89) < until < before + timedelta(minutes=91)

    def test_busy_needs_minutes(self, client, panel_headers, seed, chiang_mai):
        girl = seed.girl(status="available", city_id=chiang_mai[0].id)

        missing = client.post(f"/panels/aloha/girls/{girl.id}/toggle-busy", json={}, headers=panel_headers["aloha"])
        too_long = client.post(
            f"/panels/aloha/girls/{girl.id}/toggle-busy", json={"minutes": 1441}, headers=panel_headers["aloha"]
        )
        zero = client.post(
            f"/panels/aloha/girls/{girl.id}/toggle-busy", json={"minutes": 0}, headers=panel_headers["aloha"]
        )

        assert missing.status_code == 400
        assert too_long.status_code == 400
        assert zero.status_code == 400
        assert status_of(girl).status == "available"

    def test_offline_therapist(self, client, panel_headers, seed, chiang_mai):
        offline = seed.girl(status="offline", city_id=chiang_mai[0].id)
        no_row = seed.girl(city_id=chiang_mai[0].id)

        for girl in (offline, no_row):
            response = client.post(
                f"/panels/aloha/girls/{girl.id}/toggle-busy", json={"minutes": 30}, headers=panel_headers["aloha"]
            )
            assert response.status_code == 409
            assert response.get_json()["error_code"] == "GIRL_OFFLINE"

    def test_therapist_outside_the_panel(self, client, panel_headers, seed, chiang_mai):
        city, elsewhere = chiang_mai
        away = seed.girl(status="busy", city_id=elsewhere.id)
        blocked = seed.girl(status="busy", city_id=city.id, is_blocked=True)

        for girl in (away, blocked):
            response = client.post(
                f"/panels/aloha/girls/{girl.id}/toggle-busy", json={}, headers=panel_headers["aloha"]
            )
            assert response.status_code == 404
            assert status_of(girl).status == "busy"

    def test_forbidden_for_other_accounts(self, client, headers, panel_headers, seed, chiang_mai):
        girl = seed.girl(status="busy", city_id=chiang_mai[0].id)

        response = client.post(f"/panels/aloha/girls/{girl.id}/toggle-busy", json={}, headers=headers("support"))

        assert response.status_code == 403
        assert status_of(girl).status == "busy"
