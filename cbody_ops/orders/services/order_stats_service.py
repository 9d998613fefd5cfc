"""
Order Stats Service

Handles:
    - Dashboard order counters

The database function get_order_stats computes everything in one round
trip. When it is missing or fails, the counters are computed with plain
count queries instead.
"""

# Python Packages
import json
import logging
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import text

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.order import Order

# Helpers
from ...util.helpers import utc_now, today_start_utc

logger = logging.getLogger(__name__)


STAT_KEYS = ("pending", "pending_overtime", "active", "active_abnormal", "today_completed", "today_cancelled")





class OrderStatsService:

    def get_stats(self) -> dict:
        """
        Order counters

        Returns:
            dict: pending, pending_overtime, active, active_abnormal,
                  today_completed, today_cancelled
        """

        now = utc_now()
        today_start = today_start_utc(now)
        ten_minutes_ago = now - timedelta(minutes = constants.PENDING_OVERTIME_MINUTES)

        stats = self._from_rpc(today_start, ten_minutes_ago)

        if stats is None:
            stats = self._from_queries(today_start, ten_minutes_ago)

        return stats



    def _from_rpc(self, today_start, ten_minutes_ago):
        try:
            value = db.session.execute(
                text("SELECT get_order_stats(:p_today_start, :p_ten_minutes_ago)"),
                {"p_today_start": today_start, "p_ten_minutes_ago": ten_minutes_ago}
            ).scalar()

        except Exception as e:
            db.session.rollback()
            logger.warning("⚠️ get_order_stats unavailable, counting directly: %s", e)
            return None

        if isinstance(value, str):
            value = json.loads(value)

        if not isinstance(value, dict):
            return None

        return {key: int(value.get(key) or 0) for key in STAT_KEYS}



    def _from_queries(self, today_start, ten_minutes_ago) -> dict:
        pending = Order.query.filter(Order.status == "pending")

        return {
            "pending": pending.count(),
            "pending_overtime": pending.filter(Order.created_at < ten_minutes_ago).count(),
            "active": Order.query.filter(Order.status.in_(constants.ORDER_ACTIVE_STATUSES)).count(),
            "active_abnormal": 0,
            "today_completed": Order.query.filter(
                Order.status == "completed",
                Order.completed_at >= today_start
            ).count(),
            "today_cancelled": Order.query.filter(
                Order.status == "cancelled",
                Order.updated_at >= today_start
            ).count()
        }
