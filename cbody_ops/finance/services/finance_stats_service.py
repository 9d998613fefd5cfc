"""
Finance Stats Service

Handles:
    - Pending settlements split by finance day (today / yesterday / older)
    - Day stats over a created_at window
    - Recent pending items for the finance inbox
    - Transaction counters (pending, approved today, today amounts)

A finance day starts at 06:00 Bangkok time.
"""

# Python Packages
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import func

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.settlement import OrderSettlement, SettlementTransaction

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import finance_day_start, format_datetime, parse_datetime, to_float

# Serializers
from .settlement_query_service import SettlementQueryService
from .transaction_service import TransactionService





class FinanceStatsService:

    def get_stats(self, now = None) -> dict:
        """
        Pending settlement counters by finance day
        """

        today_start = finance_day_start(now)
        yesterday_start = today_start - timedelta(days = 1)

        pending = OrderSettlement.query.filter(OrderSettlement.settlement_status == "pending")

        return {
            "pending_total": pending.count(),
            "pending_today": pending.filter(OrderSettlement.created_at >= today_start).count(),
            "pending_yesterday": pending.filter(
                OrderSettlement.created_at >= yesterday_start,
                OrderSettlement.created_at < today_start
            ).count(),
            "pending_older": pending.filter(OrderSettlement.created_at < yesterday_start).count(),
            "pending_transactions": SettlementTransaction.query.filter(
                SettlementTransaction.approval_status == "pending"
            ).count(),
            "finance_day_start": format_datetime(today_start)
        }



    def get_transaction_stats(self, now = None) -> dict:
        """
        Transaction counters for the finance inbox

        Returns:
            dict: pending_count, today_approved_count, today_payment_amount,
                  today_withdrawal_amount (approved in the current finance day)
        """

        today_start = finance_day_start(now)

        approved_today = SettlementTransaction.query.filter(
            SettlementTransaction.approval_status == "approved",
            SettlementTransaction.approved_at >= today_start
        )

        amounts = dict(
            db.session.query(
                SettlementTransaction.transaction_type,
                func.sum(SettlementTransaction.amount)
            )
            .filter(
                SettlementTransaction.approval_status == "approved",
                SettlementTransaction.approved_at >= today_start,
                SettlementTransaction.transaction_type.in_(("payment", "withdrawal"))
            )
            .group_by(SettlementTransaction.transaction_type)
            .all()
        )

        return {
            "pending_count": SettlementTransaction.query.filter(
                SettlementTransaction.approval_status == "pending"
            ).count(),
            "today_approved_count": approved_today.count(),
            "today_payment_amount": to_float(amounts.get("payment") or 0),
            "today_withdrawal_amount": to_float(amounts.get("withdrawal") or 0),
            "finance_day_start": format_datetime(today_start)
        }



    def get_day_stats(self, start = None, end = None) -> dict:
        """
        Settlement totals for [start, end); defaults to the current finance day
        """

        try:
            start = parse_datetime(start)
            end = parse_datetime(end)
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])

        start = start or finance_day_start()
        end = end or start + timedelta(days = 1)

        if end <= start:
            raise ValidationException(messages.ERROR['INVALID_DATE_RANGE'])

        row = (
            db.session.query(
                func.count(OrderSettlement.id),
                func.sum(func.coalesce(OrderSettlement.platform_should_get, 0)),
                func.sum(func.coalesce(OrderSettlement.actual_paid_amount, 0))
            )
            .filter(OrderSettlement.created_at >= start, OrderSettlement.created_at < end)
            .one()
        )

        by_status = dict(
            db.session.query(OrderSettlement.settlement_status, func.count(OrderSettlement.id))
            .filter(OrderSettlement.created_at >= start, OrderSettlement.created_at < end)
            .group_by(OrderSettlement.settlement_status)
            .all()
        )

        return {
            "start": format_datetime(start),
            "end": format_datetime(end),
            "total": row[0] or 0,
            "pending": by_status.get("pending", 0),
            "settled": by_status.get("settled", 0),
            "rejected": by_status.get("rejected", 0),
            "platform_should_get_total": to_float(row[1] or 0),
            "actual_paid_total": to_float(row[2] or 0)
        }



    def get_pending_items(self, limit: int = None) -> dict:
        limit = limit or constants.PENDING_ITEMS_LIMIT

        transactions = (
            SettlementTransaction.query
            .filter(SettlementTransaction.approval_status == "pending")
            .order_by(SettlementTransaction.created_at.desc())
            .limit(limit)
            .all()
        )

        settlements = (
            OrderSettlement.query
            .filter(OrderSettlement.settlement_status == "pending")
            .order_by(OrderSettlement.created_at.desc())
            .limit(limit)
            .all()
        )

        return {
            "transactions": [TransactionService.serialize(item) for item in transactions],
            "settlements": [SettlementQueryService.serialize(item) for item in settlements]
        }
