"""Integration tests for review moderation and user reports."""

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import OrderReview, Report


pytestmark = pytest.mark.integration


def review(seed, rating=5, **fields):
    girl, user = seed.girl(name=fields.pop("girl_name", "Mali")), seed.user()
    order = seed.order(girl, user, status="completed")
    return seed.add(OrderReview(order_id=order.id, user_id=user.id, girl_id=girl.id, rating=rating, **fields))


class TestReviews:

    def test_stats_and_filters(self, client, headers, seed):
        review(seed, rating=5)
        review(seed, rating=2, status="approved")
        review(seed, rating=1, status="rejected", girl_name="Nok")

        stats = client.get("/reviews/stats", headers=headers("support")).get_json()["data"]
        low = client.get("/reviews/?rating=2", headers=headers("support")).get_json()["data"]
        by_name = client.get("/reviews/?search=Nok", headers=headers("support")).get_json()["data"]

        assert stats == {"pending": 1, "approved": 1, "rejected": 1, "total": 3}
        assert [item["rating"] for item in low["reviews"]] == [2]
        assert [item["girl"]["name"] for item in by_name["reviews"]] == ["Nok"]

    @pytest.mark.parametrize("query", ["rating=6", "rating=bad", "status=hidden"])
    def test_invalid_filters(self, client, headers, query):
        assert client.get(f"/reviews/?{query}", headers=headers()).status_code == 400

    def test_approve_only_from_pending(self, client, headers, seed):
        item = review(seed)

        first = client.post(f"/reviews/{item.id}/approve", headers=headers("support"))
        second = client.post(f"/reviews/{item.id}/approve", headers=headers("support"))

        assert first.get_json()["data"]["review"]["status"] == "approved"
        assert first.get_json()["data"]["review"]["reviewed_by"] == "support-id"
        assert second.status_code == 409
        assert second.get_json()["error_code"] == "REVIEW_NOT_PENDING"
        assert second.get_json()["error"] == "Review is already approved."

    def test_reject_needs_reason(self, client, headers, seed):
        item = review(seed)

        missing = client.post(f"/reviews/{item.id}/reject", json={}, headers=headers())
        too_long = client.post(f"/reviews/{item.id}/reject", json={"reason": "x" * 501}, headers=headers())
        done = client.post(f"/reviews/{item.id}/reject", json={"reason": " spam "}, headers=headers())

        assert missing.status_code == 400
        assert too_long.status_code == 400
        assert done.get_json()["data"]["review"]["reject_reason"] == "spam"

    def test_level_can_change_after_approval(self, client, headers, seed):
        item = review(seed, status="approved")

        ok = client.put(f"/reviews/{item.id}/level", json={"min_user_level": 4}, headers=headers())
        bad = client.put(f"/reviews/{item.id}/level", json={"min_user_level": 11}, headers=headers())

        assert ok.status_code == 200
        assert bad.status_code == 400
        db.session.expire_all()
        assert db.session.get(OrderReview, item.id).min_user_level == 4

    def test_finance_cannot_moderate(self, client, headers, seed):
        item = review(seed)

        assert client.post(f"/reviews/{item.id}/approve", headers=headers("finance")).status_code == 403

    def test_unknown_review(self, client, headers):
        assert client.post("/reviews/nope/approve", headers=headers()).status_code == 404


@pytest.fixture
def report(seed):
    customer, girl = seed.user(display_name="Anna"), seed.girl(name="Mali")
    order = seed.order(girl, customer)
    return seed.add(Report(
        reporter_id=customer.id,
        reporter_role="customer",
        target_id=girl.id,
        target_role="girl",
        order_id=order.id,
        report_type="late_arrival",
        description="Arrived an hour late",
    ))


class TestReports:

    def test_detail_resolves_parties(self, client, headers, report):
        data = client.get(f"/reports/{report.id}", headers=headers("support")).get_json()["data"]

        assert data["reporter"]["name"] == "Anna"
        assert data["target"]["name"] == "Mali"
        assert data["order"]["id"] == report.order_id

    def test_list_and_stats(self, client, headers, seed, report):
        girl = seed.girl()
        seed.add(Report(reporter_id=girl.id, reporter_role="girl", target_id=report.reporter_id,
                        target_role="customer", report_type="rude", status="resolved"))

        stats = client.get("/reports/stats", headers=headers()).get_json()["data"]
        late = client.get("/reports/?search=late", headers=headers()).get_json()["data"]
        bad = client.get("/reports/?reporter_role=driver", headers=headers())

        assert stats["pending"] == 1
        assert stats["resolved"] == 1
        assert stats["by_reporter_role"] == {"customer": 1, "girl": 1}
        assert [item["id"] for item in late["reports"]] == [report.id]
        assert bad.status_code == 400

    def test_resolve_once(self, client, headers, report):
        first = client.post(f"/reports/{report.id}/resolve", json={"admin_notes": "  warned  "}, headers=headers("support"))
        second = client.post(f"/reports/{report.id}/resolve", json={}, headers=headers("support"))

        data = first.get_json()["data"]["report"]
        assert data["status"] == "resolved"
        assert data["admin_notes"] == "warned"
        assert data["resolved_by"] == "support-id"
        assert second.status_code == 409

    def test_resolve_without_notes(self, client, headers, report):
        data = client.post(f"/reports/{report.id}/resolve", json={"admin_notes": "   "}, headers=headers()).get_json()["data"]

        assert data["report"]["admin_notes"] is None

    def test_notes_length(self, client, headers, report):
        response = client.post(f"/reports/{report.id}/resolve", json={"admin_notes": "x" * 1001}, headers=headers())

        assert response.status_code == 400
