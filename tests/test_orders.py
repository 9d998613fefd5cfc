"""Integration tests for order lists, stats and service upgrades."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from cbody_ops.config.database import db
from cbody_ops.models import Order, OrderSettlement


pytestmark = pytest.mark.integration


def minutes_ago(minutes):
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)


class TestStats:

    def test_counts_without_rpc(self, client, headers, seed):
        """SQLite has no get_order_stats, so the direct counts are used."""
        girl, user = seed.girl(), seed.user()
        seed.order(girl, user, status="pending", created_at=minutes_ago(20))
        seed.order(girl, user, status="pending")
        seed.order(girl, user, status="confirmed")
        seed.order(girl, user, status="completed", completed_at=datetime.now(timezone.utc))
        seed.order(girl, user, status="cancelled")

        data = client.get("/orders/stats", headers=headers("support")).get_json()["data"]

        assert data == {
            "pending": 2,
            "pending_overtime": 1,
            "active": 1,
            "active_abnormal": 0,
            "today_completed": 1,
            "today_cancelled": 1,
        }


class TestLists:

    def test_filter_by_status_and_search(self, client, headers, seed):
        girl, user = seed.girl(), seed.user()
        seed.order(girl, user, order_number="ORD-A1", status="pending")
        seed.order(girl, user, order_number="ORD-B2", status="completed")

        data = client.get("/orders/?status=completed&search=B2", headers=headers()).get_json()["data"]

        assert [order["order_number"] for order in data["orders"]] == ["ORD-B2"]

    def test_invalid_status(self, client, headers):
        assert client.get("/orders/?status=lost", headers=headers()).status_code == 400

    def test_detail_includes_settlement(self, client, headers, seed):
        order = seed.order(seed.girl(), seed.user())
        seed.settlement(order, service_commission_rate=Decimal("0.3"))

        data = client.get(f"/orders/{order.id}", headers=headers()).get_json()["data"]

        assert data["settlement"]["settlement_status"] == "pending"
        assert data["total_amount"] == 1000.0

    def test_monitoring_pending_first_with_overtime(self, client, headers, seed):
        girl, user = seed.girl(), seed.user()
        seed.order(girl, user, status="confirmed", created_at=minutes_ago(1))
        late = seed.order(girl, user, status="pending", created_at=minutes_ago(15),
                          address_snapshot={"contact": {"n": "Somchai", "p": "0800000000"}})

        data = client.get("/orders/monitoring?time_range=3days", headers=headers()).get_json()["data"]

        first = data["orders"][0]
        assert first["id"] == late.id
        assert first["is_overtime"] is True
        assert first["contact"]["n"] == "Somchai"

    def test_monitoring_only_abnormal(self, client, headers, seed):
        girl, user = seed.girl(), seed.user()
        seed.order(girl, user, status="pending", created_at=minutes_ago(2))
        late = seed.order(girl, user, status="pending", created_at=minutes_ago(30))

        data = client.get("/orders/monitoring?time_range=7days&only_abnormal=true", headers=headers()).get_json()["data"]

        assert [order["id"] for order in data["orders"]] == [late.id]

    @pytest.mark.parametrize("query", ["time_range=custom", "time_range=forever", "time_range=custom&start_date=bad&end_date=bad"])
    def test_monitoring_rejects_bad_ranges(self, client, headers, query):
        assert client.get(f"/orders/monitoring?{query}", headers=headers()).status_code == 400


@pytest.fixture
def upgrade_case(seed):
    """A 60 min order at 1000 with a qualified 90 min option at 1500."""
    girl, user = seed.girl(), seed.user()

    current, (current_duration,) = seed.service(code="basic", prices=((60, "1000.00"),))
    better, (better_duration,) = seed.service(code="deluxe", prices=((90, "1500.00"),), title={"en": "Deluxe"})
    premium, (premium_duration,) = seed.service(code="premium", prices=((120, "2000.00"),))
    cheaper, (cheaper_duration,) = seed.service(code="short", prices=((30, "600.00"),))

    seed.qualify(girl, current)
    seed.qualify(girl, better)
    seed.qualify(girl, premium, is_qualified=False)
    seed.qualify(girl, cheaper)

    order = seed.order(
        girl, user,
        status="confirmed",
        service_id=current.id,
        service_duration_id=current_duration.id,
        travel_fee=Decimal("0.00"),
        pricing_snapshot={"source": "app"},
    )
    settlement = seed.settlement(order, service_commission_rate=Decimal("0.3000"))

    return {
        "order": order,
        "settlement": settlement,
        "better": better_duration,
        "premium": premium_duration,
        "cheaper": cheaper_duration,
    }


class TestUpgrade:

    def test_only_qualified_pricier_options(self, client, headers, upgrade_case):
        order = upgrade_case["order"]

        data = client.get(f"/orders/{order.id}/upgradable-services", headers=headers("support")).get_json()["data"]

        assert [option["service_duration_id"] for option in data["options"]] == [upgrade_case["better"].id]
        assert data["options"][0]["price_diff"] == 500.0
        assert data["current"]["price"] == 1000.0

    def test_upgrade_reprices_order_and_settlement(self, client, headers, upgrade_case):
        order = upgrade_case["order"]

        response = client.post(
            f"/orders/{order.id}/upgrade",
            json={"service_duration_id": upgrade_case["better"].id},
            headers=headers("support"),
        )

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["price_diff"] == 500.0
        assert data["new_total_amount"] == 1500.0

        db.session.expire_all()
        order = db.session.get(Order, order.id)
        assert order.service_price == Decimal("1500.00")
        assert order.service_fee == Decimal("1500.00")
        assert order.service_duration == 90
        assert order.service_name == {"en": "Deluxe"}
        assert order.pricing_snapshot["source"] == "app"
        assert len(order.pricing_snapshot["upgrades"]) == 1
        assert order.pricing_snapshot["upgrades"][0]["operator_id"] == "support-id"

        settlement = db.session.get(OrderSettlement, upgrade_case["settlement"].id)
        assert settlement.service_fee == Decimal("1500.00")
        assert settlement.platform_should_get == Decimal("450.00")
        assert settlement.settlement_amount == Decimal("-450.00")

    @pytest.mark.parametrize("target", ["premium", "cheaper"])
    def test_rejects_unavailable_targets(self, client, headers, upgrade_case, target):
        order = upgrade_case["order"]

        response = client.post(
            f"/orders/{order.id}/upgrade",
            json={"service_duration_id": upgrade_case[target].id},
            headers=headers(),
        )

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_UPGRADE_TARGET"

    def test_finished_order_cannot_be_upgraded(self, client, headers, upgrade_case):
        order = upgrade_case["order"]
        order.status = "completed"
        db.session.commit()

        listing = client.get(f"/orders/{order.id}/upgradable-services", headers=headers()).get_json()["data"]
        response = client.post(
            f"/orders/{order.id}/upgrade",
            json={"service_duration_id": upgrade_case["better"].id},
            headers=headers(),
        )

        assert listing["options"] == []
        assert response.status_code == 409
        assert response.get_json()["error_code"] == "ORDER_NOT_UPGRADABLE"

    def test_settled_settlement_locks_upgrade(self, client, headers, upgrade_case):
        upgrade_case["settlement"].settlement_status = "settled"
        db.session.commit()

        response = client.post(
            f"/orders/{upgrade_case['order'].id}/upgrade",
            json={"service_duration_id": upgrade_case["better"].id},
            headers=headers(),
        )

        assert response.status_code == 409
        assert response.get_json()["error_code"] == "SETTLEMENT_LOCKED"

    def test_finance_cannot_upgrade(self, client, headers, upgrade_case):
        response = client.post(
            f"/orders/{upgrade_case['order'].id}/upgrade",
            json={"service_duration_id": upgrade_case["better"].id},
            headers=headers("finance"),
        )

        assert response.status_code == 403

    def test_missing_duration_id(self, client, headers, upgrade_case):
        response = client.post(f"/orders/{upgrade_case['order'].id}/upgrade", json={}, headers=headers())

        assert response.status_code == 400
