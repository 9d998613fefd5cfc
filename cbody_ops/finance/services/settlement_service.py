"""
Settlement Service

Handles:
    - Update settlement payment info
    - Mark settled
    - Reject settlement

Settlement state changes never touch the therapist balance; balances move
only through approved transactions.
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.settlement import OrderSettlement

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import to_decimal, utc_now

# Rules
from .settlement_calculator import settlement_amount
from .settlement_query_service import SettlementQueryService

logger = logging.getLogger(__name__)


MONEY_FIELDS = ("customer_paid_to_platform", "actual_paid_amount", "platform_should_get")
TEXT_FIELDS = ("payment_content_type", "payment_method", "payment_notes", "notes")





class SettlementService:

    def _get_settlement(self, settlement_id: str) -> OrderSettlement:
        settlement = OrderSettlement.query.filter_by(id = settlement_id).first()

        if not settlement:
            raise NotFoundException(messages.ERROR['SETTLEMENT_NOT_FOUND'])

        return settlement


    def _require_pending(self, settlement: OrderSettlement):
        if settlement.settlement_status == "settled":
            raise ServiceException(
                error_code = "ALREADY_SETTLED",
                message = messages.ERROR['ALREADY_SETTLED'],
                status_code = 409
            )

        if settlement.settlement_status != "pending":
            raise ServiceException(
                error_code = "SETTLEMENT_NOT_PENDING",
                message = messages.ERROR['SETTLEMENT_NOT_PENDING'],
                status_code = 409
            )



    def update_payment(self, operator, settlement_id: str, updates: dict) -> dict:
        """
        Partial update of payment info

        settlement_amount is recomputed whenever customer_paid_to_platform or
        platform_should_get is part of the update.
        """

        settlement = self._get_settlement(settlement_id)

        if settlement.settlement_status == "rejected":
            raise ServiceException(
                error_code = "SETTLEMENT_NOT_PENDING",
                message = messages.ERROR['SETTLEMENT_NOT_PENDING'],
                status_code = 409
            )

        try:
            for key in MONEY_FIELDS:
                if key in updates:
                    value = updates[key]
                    setattr(settlement, key, to_decimal(value) if value is not None else None)

            for key in TEXT_FIELDS:
                if key in updates:
                    setattr(settlement, key, updates[key])

            if "customer_paid_to_platform" in updates or "platform_should_get" in updates:
                settlement.settlement_amount = settlement_amount(
                    settlement.customer_paid_to_platform,
                    settlement.platform_should_get
                )

            settlement.operator_id = operator.id
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "SETTLEMENT_UPDATE_FAILED",
                message = messages.ERROR['SETTLEMENT_UPDATE_FAILED'],
                details = str(errors)
            )

        return {
            "settlement": SettlementQueryService.serialize(settlement),
            "message": messages.SUCCESS['SETTLEMENT_UPDATED']
        }



    def mark_settled(self, operator, settlement_id: str) -> dict:
        settlement = self._get_settlement(settlement_id)
        self._require_pending(settlement)

        try:
            settlement.settlement_status = "settled"
            settlement.settled_at = utc_now()
            settlement.operator_id = operator.id
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "SETTLEMENT_UPDATE_FAILED",
                message = messages.ERROR['SETTLEMENT_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("✅ Settlement %s settled by %s", settlement.id, operator.id)

        return {
            "settlement": SettlementQueryService.serialize(settlement),
            "message": messages.SUCCESS['SETTLEMENT_SETTLED']
        }



    def reject(self, operator, settlement_id: str, reason: str) -> dict:
        settlement = self._get_settlement(settlement_id)
        self._require_pending(settlement)

        try:
            settlement.settlement_status = "rejected"
            settlement.reject_reason = reason.strip()
            settlement.operator_id = operator.id
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "SETTLEMENT_UPDATE_FAILED",
                message = messages.ERROR['SETTLEMENT_UPDATE_FAILED'],
                details = str(errors)
            )

        return {
            "settlement": SettlementQueryService.serialize(settlement),
            "message": messages.SUCCESS['SETTLEMENT_REJECTED']
        }
