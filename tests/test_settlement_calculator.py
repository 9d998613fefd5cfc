"""Unit tests for settlement arithmetic."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from cbody_ops.finance.services.settlement_calculator import (
    platform_share,
    recalculate_settlement,
    settlement_amount,
)


pytestmark = pytest.mark.unit


def make_settlement(**fields):
    values = {
        "service_fee": Decimal("1000.00"),
        "extra_fee": Decimal("200.00"),
        "service_commission_rate": Decimal("0.3000"),
        "extra_commission_rate": Decimal("0.5000"),
        "platform_should_get": Decimal("0.00"),
        "customer_paid_to_platform": Decimal("1200.00"),
        "settlement_amount": Decimal("0.00"),
    }
    values.update(fields)
    return SimpleNamespace(**values)


class TestPlatformShare:

    def test_commission_on_both_fees(self):
        assert platform_share("1000", "200", "0.30", "0.50") == Decimal("400.00")

    def test_rounds_to_cents(self):
        assert platform_share("1000", "0", "0.3333", "0") == Decimal("333.30")

    def test_missing_rates_count_as_zero(self):
        assert platform_share("1000", "200", None, None) == Decimal("0.00")


class TestSettlementAmount:

    def test_platform_owes_therapist(self):
        assert settlement_amount("1200", "400") == Decimal("800.00")

    def test_therapist_owes_platform(self):
        """Cash paid to the therapist means nothing reached the platform."""
        assert settlement_amount("0", "400") == Decimal("-400.00")


class TestRecalculateSettlement:

    def test_keeps_fees_when_not_given(self):
        settlement = recalculate_settlement(make_settlement())

        assert settlement.platform_should_get == Decimal("400.00")
        assert settlement.settlement_amount == Decimal("800.00")

    def test_new_service_fee_flows_through(self):
        settlement = recalculate_settlement(make_settlement(), service_fee=Decimal("1500.00"))

        assert settlement.service_fee == Decimal("1500.00")
        assert settlement.platform_should_get == Decimal("550.00")
        assert settlement.settlement_amount == Decimal("650.00")
