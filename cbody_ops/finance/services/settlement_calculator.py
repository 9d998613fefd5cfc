"""
Settlement Calculator

Money rules shared by finance and order upgrades:

    platform_should_get = service_fee * service_commission_rate
                        + extra_fee * extra_commission_rate
    settlement_amount   = customer_paid_to_platform - platform_should_get

A negative settlement_amount means the therapist owes the platform, a
positive one means the platform owes the therapist. Rates are fractions.
"""

# Python Packages
from decimal import Decimal

# Helpers
from ...util.helpers import to_decimal





def platform_share(service_fee, extra_fee, service_commission_rate, extra_commission_rate) -> Decimal:
    service_part = to_decimal(service_fee) * Decimal(str(service_commission_rate or 0))
    extra_part = to_decimal(extra_fee) * Decimal(str(extra_commission_rate or 0))

    return to_decimal(service_part + extra_part)



def settlement_amount(customer_paid_to_platform, platform_should_get) -> Decimal:
    return to_decimal(to_decimal(customer_paid_to_platform) - to_decimal(platform_should_get))



def recalculate_settlement(settlement, service_fee = None, extra_fee = None):
    """
    Refresh the fees of a settlement row and recompute its derived amounts

    Args:
        settlement (OrderSettlement): row to update in place
        service_fee: new service fee, or None to keep the current one
        extra_fee: new extra fee, or None to keep the current one

    Returns:
        OrderSettlement
    """

    if service_fee is not None:
        settlement.service_fee = to_decimal(service_fee)

    if extra_fee is not None:
        settlement.extra_fee = to_decimal(extra_fee)

    settlement.platform_should_get = platform_share(
        settlement.service_fee,
        settlement.extra_fee,
        settlement.service_commission_rate,
        settlement.extra_commission_rate
    )

    settlement.settlement_amount = settlement_amount(
        settlement.customer_paid_to_platform,
        settlement.platform_should_get
    )

    return settlement
