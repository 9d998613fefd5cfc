"""Integration tests for therapist profiles, live status and attendance."""

from datetime import date, datetime, timedelta, timezone

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import Girl, GirlStatus, GirlWorkSession


pytestmark = pytest.mark.integration


@pytest.fixture
def form(seed):
    """A city and a category to hang profiles on."""
    return seed.city(code="CNX"), seed.category()


def profile_payload(form, **overrides):
    city, category = form
    payload = {
        "username": "nok_1",
        "name": "Nok",
        "city_id": city.id,
        "max_travel_distance": 15,
        "category_ids": [category.id],
    }
    payload.update(overrides)
    return payload


class TestFormLists:

    def test_cities_and_categories(self, client, headers, seed):
        second = seed.city(sort_order=2)
        first = seed.city(sort_order=1)
        seed.city(is_active=False)
        category = seed.category()

        cities = client.get("/therapists/cities", headers=headers("support")).get_json()["data"]
        categories = client.get("/therapists/categories", headers=headers("finance")).get_json()["data"]

        assert [item["id"] for item in cities["cities"]] == [first.id, second.id]
        assert [item["id"] for item in categories["categories"]] == [category.id]


class TestProfiles:

    def test_create_assigns_next_number(self, client, headers, seed, form):
        seed.girl(girl_number=1007)

        response = client.post(
            "/therapists/",
            json=profile_payload(form, languages=["TH", "EN_Base"], birth_date="1998-04-01", height=165),
            headers=headers("admin"),
        )
        data = response.get_json()["data"]["girl"]

        assert response.status_code == 201
        assert data["girl_number"] == 1008
        assert data["trust_score"] == 80
        assert data["sort_order"] == 999
        assert data["category_ids"] == [form[1].id]
        assert data["birth_date"] == "1998-04-01"
        assert db.session.get(Girl, data["id"]).birth_date == date(1998, 4, 1)

    def test_create_rejects_bad_payloads(self, client, headers, form):
        for payload in (
            profile_payload(form, username="ab"),
            profile_payload(form, username="nok one"),
            profile_payload(form, languages=["FR"]),
            profile_payload(form, height=90),
            profile_payload(form, weight=250),
            profile_payload(form, rating=5.5),
            profile_payload(form, trust_score=101),
            profile_payload(form, max_travel_distance=0),
            profile_payload(form, category_ids=[]),
            profile_payload(form, avatar_url="ftp://x/y.jpg"),
            profile_payload(form, badge="vip"),
            profile_payload(form, gender=2),
            profile_payload(form, birth_date="01/04/1998"),
            profile_payload(form, profile={"en": ""}),
            {key: value for key, value in profile_payload(form).items() if key != "city_id"},
        ):
            response = client.post("/therapists/", json=payload, headers=headers("admin"))
            assert response.status_code == 400, payload

    def test_number_and_username_are_unique(self, client, headers, seed, form):
        seed.girl(girl_number=1500, username="nok_1")

        same_username = client.post("/therapists/", json=profile_payload(form), headers=headers("admin"))
        same_number = client.post(
            "/therapists/", json=profile_payload(form, username="nok_2", girl_number=1500), headers=headers("admin")
        )

        assert same_username.status_code == 409
        assert same_username.get_json()["error_code"] == "USERNAME_TAKEN"
        assert same_number.get_json()["error_code"] == "GIRL_NUMBER_TAKEN"

    def test_unknown_city_or_category(self, client, headers, form):
        no_city = client.post("/therapists/", json=profile_payload(form, city_id=999), headers=headers("admin"))
        no_category = client.post("/therapists/", json=profile_payload(form, category_ids=[999]), headers=headers("admin"))

        assert no_city.status_code == 404
        assert no_category.status_code == 404

    def test_update(self, client, headers, seed, form):
        girl = seed.girl(username="nok_1")
        other = seed.category()

        response = client.patch(
            f"/therapists/{girl.id}",
            json={"name": "Nok Noi", "badge": "hot", "category_ids": [other.id], "username": "nok_1"},
            headers=headers("admin"),
        )
        support = client.patch(f"/therapists/{girl.id}", json={"name": "X"}, headers=headers("support"))
        empty = client.patch(f"/therapists/{girl.id}", json={}, headers=headers("admin"))

        data = response.get_json()["data"]["girl"]
        assert data["name"] == "Nok Noi"
        assert data["badge"] == "hot"
        assert data["category_ids"] == [other.id]
        assert support.status_code == 403
        assert empty.status_code == 400

    def test_list_filters_and_sort(self, client, headers, seed, form):
        city, category = form
        low = seed.girl(rating=3.5)
        high = seed.girl(rating=4.8)
        seed.girl(is_blocked=True)
        low.categories = [category]
        db.session.commit()

        by_rating = client.get("/therapists/?is_blocked=false&sort_by=rating", headers=headers()).get_json()["data"]
        by_category = client.get(f"/therapists/?category_id={category.id}", headers=headers()).get_json()["data"]
        bad = client.get("/therapists/?sort_by=age", headers=headers())

        assert [item["id"] for item in by_rating["girls"]] == [high.id, low.id]
        assert [item["id"] for item in by_category["girls"]] == [low.id]
        assert bad.status_code == 400

    def test_detail(self, client, headers, seed):
        girl = seed.girl(name="Ploy")

        assert client.get(f"/therapists/{girl.id}", headers=headers()).get_json()["data"]["name"] == "Ploy"
        assert client.get("/therapists/missing", headers=headers()).status_code == 404


class TestLiveStatus:

    def test_missing_row_reads_offline(self, client, headers, seed):
        girl = seed.girl()

        data = client.get(f"/therapists/{girl.id}/status", headers=headers("support")).get_json()["data"]

        assert data["status"] == "offline"
        assert data["current_lat"] is None

    def test_upsert(self, client, headers, seed):
        girl = seed.girl()

        created = client.put(
            f"/therapists/{girl.id}/status",
            json={"status": "available", "current_lat": 18.79, "current_lng": 98.98},
            headers=headers("admin"),
        )
        updated = client.put(
            f"/therapists/{girl.id}/status",
            json={"status": "busy", "next_available_time": "2030-01-01T10:00:00Z"},
            headers=headers("admin"),
        )

        assert created.get_json()["data"]["last_online_at"] is not None
        db.session.expire_all()
        row = db.session.get(GirlStatus, girl.id)
        assert row.status == "busy"
        assert row.current_lat == 18.79
        assert updated.get_json()["data"]["next_available_time"].startswith("2030-01-01T10:00:00")

    def test_rejects_bad_values(self, client, headers, seed):
        girl = seed.girl()

        for payload in (
            {},
            {"status": "sleeping"},
            {"current_lat": 91},
            {"current_lng": -181},
            {"next_available_time": "tomorrow"},
        ):
            response = client.put(f"/therapists/{girl.id}/status", json=payload, headers=headers("admin"))
            assert response.status_code == 400, payload

    def test_unknown_therapist(self, client, headers):
        response = client.put("/therapists/missing/status", json={"status": "offline"}, headers=headers("admin"))

        assert response.status_code == 404


class TestAttendance:

    @pytest.fixture
    def window(self):
        end = datetime.now(timezone.utc).replace(microsecond=0)
        return end - timedelta(days=1), end

    @pytest.fixture
    def crew(self, seed, window):
        start, end = window
        user = seed.user()
        steady, star, idle = seed.girl(name="Steady"), seed.girl(name="Star"), seed.girl(name="Idle")
        seed.girl(name="Blocked", is_blocked=True)

        seed.add(GirlWorkSession(girl_id=steady.id, started_at=end - timedelta(hours=3), ended_at=end - timedelta(hours=1)))
        seed.add(GirlWorkSession(girl_id=star.id, started_at=end - timedelta(hours=5), ended_at=end - timedelta(hours=1)))
        # Only the last hour of this session falls inside the window
        seed.add(GirlWorkSession(girl_id=star.id, started_at=start - timedelta(hours=2), ended_at=start + timedelta(hours=1)))

        done = end - timedelta(hours=2)
        seed.order(steady, user, status="completed", completed_at=done, service_duration=60)
        seed.order(star, user, status="completed", completed_at=done, service_duration=90)
        seed.order(star, user, status="completed", completed_at=done, service_duration=60)
        seed.order(star, user, status="cancelled", service_duration=120)
        seed.order(idle, user, status="completed", completed_at=start - timedelta(hours=1), service_duration=60)

        return steady, star, idle

    def fetch(self, client, headers, window, **params):
        start, end = window
        params.update({"start_date": start.isoformat(), "end_date": end.isoformat()})
        return client.get("/therapists/attendance", query_string=params, headers=headers("support"))

    def test_rates_and_ratings(self, client, headers, window, crew):
        steady, star, idle = crew

        rows = {row["girl_id"]: row for row in self.fetch(client, headers, window).get_json()["data"]["girls"]}

        assert set(rows) == {steady.id, star.id, idle.id}
        assert rows[steady.id]["online_seconds"] == 7200
        assert rows[steady.id]["order_duration_seconds"] == 3600
        assert rows[steady.id]["booking_rate_percent"] == 50.0
        assert rows[steady.id]["performance_rating"] == "good"
        assert rows[star.id]["online_seconds"] == 18000
        assert rows[star.id]["order_count"] == 2
        assert rows[star.id]["booking_rate_percent"] == 50.0
        assert rows[idle.id]["order_count"] == 0
        assert rows[idle.id]["performance_rating"] == "inactive"

    def test_sorting(self, client, headers, window, crew):
        steady, star, idle = crew

        by_online = self.fetch(client, headers, window, sort_by="online_seconds").get_json()["data"]
        by_number = self.fetch(client, headers, window, sort_by="girl_number").get_json()["data"]
        bad = self.fetch(client, headers, window, sort_by="mood")

        assert [row["girl_id"] for row in by_online["girls"]] == [star.id, steady.id, idle.id]
        assert [row["girl_id"] for row in by_number["girls"]] == [steady.id, star.id, idle.id]
        assert bad.status_code == 400

    def test_search_and_paging(self, client, headers, window, crew):
        steady, star, idle = crew

        found = self.fetch(client, headers, window, search="Sta").get_json()["data"]
        paged = self.fetch(client, headers, window, sort_by="girl_number", limit=2, page=2).get_json()["data"]

        assert [row["girl_id"] for row in found["girls"]] == [star.id]
        assert [row["girl_id"] for row in paged["girls"]] == [idle.id]
        assert paged["pagination"]["total"] == 3

    def test_reversed_window_and_finance_role(self, client, headers, window):
        start, end = window

        reversed_window = client.get(
            "/therapists/attendance",
            query_string={"start_date": end.isoformat(), "end_date": start.isoformat()},
            headers=headers("support"),
        )
        finance = client.get("/therapists/attendance", headers=headers("finance"))

        assert reversed_window.status_code == 400
        assert finance.status_code == 403

    def test_rating_thresholds(self):
        from cbody_ops.therapists.services.attendance_service import AttendanceService

        assert AttendanceService.rating(0, 0) == "inactive"
        assert AttendanceService.rating(3600, 60) == "excellent"
        assert AttendanceService.rating(3600, 40) == "good"
        assert AttendanceService.rating(3600, 20) == "average"
        assert AttendanceService.rating(3600, 19.9) == "poor"
