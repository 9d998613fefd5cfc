"""
List Order Service

Handles:
    - Order list with search, filters, sort and paging
    - Order detail with therapist, customer and settlement
    - Monitoring list (time range, status, abnormal, wide search)
"""

# Python Packages
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import or_, case

# Constants
from ...base import constants

# Models
from ...models.order import Order
from ...models.girl import Girl
from ...models.user_profile import UserProfile
from ...models.settlement import OrderSettlement

# Exceptions
from ...util.exceptions import NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import (
    as_utc,
    utc_now,
    today_start_utc,
    format_datetime,
    parse_datetime,
    parse_bool,
    parse_list,
    parse_paging,
    paginate,
    to_float
)

# Serializers
from ...finance.services.settlement_query_service import SettlementQueryService


SORT_COLUMNS = {
    "created_at": Order.created_at,
    "scheduled_start_at": Order.scheduled_start_at,
    "total_amount": Order.total_amount
}

TIME_RANGES = {
    "3days": 3,
    "7days": 7
}





class ListOrderService:

    def list_orders(self, args) -> dict:
        """
        Fetch order list

        Args:
            args: search, status, start_date, end_date, sort_by, sort_order, page, limit

        Returns:
            dict
        """

        page, limit = parse_paging(args)
        query = Order.query

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            query = query.filter(Order.order_number.ilike(f"%{search}%"))

        status = args.get("status")
        if status:
            if status not in constants.ORDER_STATUSES:
                raise ValidationException(messages.ERROR['INVALID_ORDER_STATUS'])
            query = query.filter(Order.status == status)

        start_date, end_date = self._date_window(args.get("start_date"), args.get("end_date"))
        if start_date:
            query = query.filter(Order.created_at >= start_date)
        if end_date:
            query = query.filter(Order.created_at <= end_date)

        # Sort
        column = SORT_COLUMNS.get(args.get("sort_by"), Order.created_at)
        column = column.asc() if args.get("sort_order") == "asc" else column.desc()

        orders, meta = paginate(query.order_by(column, Order.id), page, limit)

        return {
            "orders": [self.serialize(order) for order in orders],
            "pagination": meta
        }



    def get_order(self, order_id: str) -> dict:
        """
        Order detail
        """

        order = Order.query.filter_by(id = order_id).first()

        if not order:
            raise NotFoundException(messages.ERROR['ORDER_NOT_FOUND'])

        settlement = OrderSettlement.query.filter_by(order_id = order.id).first()

        data = self.serialize(order)
        data["address_snapshot"] = order.address_snapshot
        data["pricing_snapshot"] = order.pricing_snapshot
        data["settlement"] = SettlementQueryService.serialize(settlement) if settlement else None

        return data



    def list_monitoring(self, args) -> dict:
        """
        Monitoring list: pending first, then newest

        Args:
            args: time_range (today | 3days | 7days | custom), start_date, end_date,
                  status (list), only_abnormal, search, page, limit
        """

        page, limit = parse_paging(args, default_limit = constants.MONITORING_PAGE_SIZE)
        now = utc_now()

        query = (
            Order.query
            .join(Girl, Girl.id == Order.girl_id)
            .join(UserProfile, UserProfile.id == Order.user_id)
        )

        # Time range
        time_range = args.get("time_range") or "today"

        if time_range == "today":
            query = query.filter(Order.created_at >= today_start_utc(now))

        elif time_range in TIME_RANGES:
            query = query.filter(Order.created_at >= now - timedelta(days = TIME_RANGES[time_range]))

        elif time_range == "custom":
            start_date, end_date = self._date_window(args.get("start_date"), args.get("end_date"))
            if not start_date or not end_date:
                raise ValidationException(messages.ERROR['CUSTOM_RANGE_REQUIRED'])
            query = query.filter(Order.created_at >= start_date, Order.created_at <= end_date)

        else:
            raise ValidationException(messages.ERROR['INVALID_TIME_RANGE'])

        statuses = parse_list(args, "status")
        if statuses:
            query = query.filter(Order.status.in_(statuses))

        if parse_bool(args.get("only_abnormal")):
            overtime = now - timedelta(minutes = constants.PENDING_OVERTIME_MINUTES)
            query = query.filter(Order.status == "pending", Order.created_at < overtime)

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            pattern = f"%{search}%"
            conditions = [
                Order.order_number.ilike(pattern),
                Girl.name.ilike(pattern),
                Girl.username.ilike(pattern),
                Order.address_snapshot[("contact", "n")].as_string().ilike(pattern),
                Order.address_snapshot[("contact", "p")].as_string().ilike(pattern),
                UserProfile.username.ilike(pattern),
                UserProfile.display_name.ilike(pattern)
            ]
            if search.isdigit():
                conditions.append(Girl.girl_number == int(search))
            query = query.filter(or_(*conditions))

        pending_first = case((Order.status == "pending", 0), else_ = 1)
        orders, meta = paginate(query.order_by(pending_first, Order.created_at.desc()), page, limit)

        overtime = now - timedelta(minutes = constants.PENDING_OVERTIME_MINUTES)
        items = []
        for order in orders:
            item = self.serialize(order)
            item["contact"] = (order.address_snapshot or {}).get("contact")
            item["is_overtime"] = order.status == "pending" and as_utc(order.created_at) < overtime
            items.append(item)

        return {"orders": items, "pagination": meta}



    def _date_window(self, start, end):
        try:
            return parse_datetime(start), parse_datetime(end)
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])



    @staticmethod
    def serialize(order: Order) -> dict:
        girl = order.girl
        user = order.user

        return {
            "id": order.id,
            "order_number": order.order_number,
            "status": order.status,
            "girl_id": order.girl_id,
            "girl": {
                "id": girl.id,
                "girl_number": girl.girl_number,
                "name": girl.name,
                "username": girl.username,
                "avatar_url": girl.avatar_url
            } if girl else None,
            "user_id": order.user_id,
            "user": {
                "id": user.id,
                "username": user.username,
                "display_name": user.display_name,
                "avatar_url": user.avatar_url
            } if user else None,
            "service_id": order.service_id,
            "service_duration_id": order.service_duration_id,
            "service_name": order.service_name,
            "service_duration": order.service_duration,
            "service_price": to_float(order.service_price),
            "currency": order.currency,
            "service_fee": to_float(order.service_fee),
            "travel_fee": to_float(order.travel_fee),
            "extra_fee": to_float(order.extra_fee),
            "discount_amount": to_float(order.discount_amount),
            "total_amount": to_float(order.total_amount),
            "scheduled_start_at": format_datetime(order.scheduled_start_at),
            "completed_at": format_datetime(order.completed_at),
            "created_at": format_datetime(order.created_at),
            "updated_at": format_datetime(order.updated_at)
        }
