"""
Settlement Query Service

Handles:
    - Order settlement list with filters, search, sort and paging
    - Settlement detail
"""

# SQLAlchemy
from sqlalchemy import or_

# Constants
from ...base import constants

# Models
from ...models.settlement import OrderSettlement
from ...models.order import Order
from ...models.girl import Girl

# Exceptions
from ...util.exceptions import NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, parse_datetime, parse_paging, paginate, to_float


SORT_COLUMNS = {
    "girl_name": Girl.name,
    "created_at": OrderSettlement.created_at,
    "service_fee": OrderSettlement.service_fee,
    "platform_should_get": OrderSettlement.platform_should_get
}





class SettlementQueryService:

    def list_settlements(self, args) -> dict:
        """
        Fetch settlement list

        Args:
            args: girl_id, status, platform_collected (collected | not_collected),
                  start_date, end_date, search, sort_by, sort_order, page, page_size
        """

        page, limit = parse_paging(args, limit_key = "page_size")

        query = (
            OrderSettlement.query
            .join(Girl, Girl.id == OrderSettlement.girl_id)
            .join(Order, Order.id == OrderSettlement.order_id)
        )

        if args.get("girl_id"):
            query = query.filter(OrderSettlement.girl_id == args.get("girl_id"))

        status = args.get("status")
        if status:
            if status not in constants.SETTLEMENT_STATUSES:
                raise ValidationException(messages.ERROR['INVALID_SETTLEMENT_STATUS'])
            query = query.filter(OrderSettlement.settlement_status == status)

        collected = args.get("platform_collected")
        if collected == "collected":
            query = query.filter(OrderSettlement.payment_content_type.isnot(None))
        elif collected == "not_collected":
            query = query.filter(OrderSettlement.payment_content_type.is_(None))

        try:
            start_date = parse_datetime(args.get("start_date"))
            end_date = parse_datetime(args.get("end_date"))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])

        if start_date:
            query = query.filter(OrderSettlement.created_at >= start_date)
        if end_date:
            query = query.filter(OrderSettlement.created_at <= end_date)

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            if search.isdigit():
                query = query.filter(
                    or_(Girl.girl_number == int(search), Order.order_number.ilike(f"%{search}%"))
                )
            else:
                query = query.filter(
                    or_(Girl.name.ilike(f"%{search}%"), Order.order_number.ilike(f"%{search}%"))
                )

        column = SORT_COLUMNS.get(args.get("sort_by"), OrderSettlement.created_at)
        column = column.asc() if args.get("sort_order") == "asc" else column.desc()

        settlements, meta = paginate(query.order_by(column, OrderSettlement.id), page, limit)

        return {
            "settlements": [self.serialize(settlement) for settlement in settlements],
            "pagination": meta
        }



    def get_settlement(self, settlement_id: str) -> dict:
        settlement = OrderSettlement.query.filter_by(id = settlement_id).first()

        if not settlement:
            raise NotFoundException(messages.ERROR['SETTLEMENT_NOT_FOUND'])

        data = self.serialize(settlement)
        data["order"] = {
            "id": settlement.order.id,
            "order_number": settlement.order.order_number,
            "status": settlement.order.status,
            "service_name": settlement.order.service_name,
            "service_duration": settlement.order.service_duration,
            "total_amount": to_float(settlement.order.total_amount),
            "currency": settlement.order.currency,
            "completed_at": format_datetime(settlement.order.completed_at)
        } if settlement.order else None

        return data



    @staticmethod
    def serialize(settlement: OrderSettlement) -> dict:
        girl = settlement.girl
        order = settlement.order

        return {
            "id": settlement.id,
            "order_id": settlement.order_id,
            "order_number": order.order_number if order else None,
            "girl_id": settlement.girl_id,
            "girl_number": girl.girl_number if girl else None,
            "girl_name": girl.name if girl else None,
            "service_fee": to_float(settlement.service_fee),
            "extra_fee": to_float(settlement.extra_fee),
            "service_commission_rate": float(settlement.service_commission_rate or 0),
            "extra_commission_rate": float(settlement.extra_commission_rate or 0),
            "platform_should_get": to_float(settlement.platform_should_get),
            "customer_paid_to_platform": to_float(settlement.customer_paid_to_platform),
            "settlement_amount": to_float(settlement.settlement_amount),
            "actual_paid_amount": to_float(settlement.actual_paid_amount),
            "payment_content_type": settlement.payment_content_type,
            "payment_method": settlement.payment_method,
            "payment_notes": settlement.payment_notes,
            "notes": settlement.notes,
            "settlement_status": settlement.settlement_status,
            "reject_reason": settlement.reject_reason,
            "settled_at": format_datetime(settlement.settled_at),
            "operator_id": settlement.operator_id,
            "created_at": format_datetime(settlement.created_at),
            "updated_at": format_datetime(settlement.updated_at)
        }
