"""
Attendance Service

Handles:
    - Per-therapist attendance over a window: online time, completed orders,
      time in service, booking rate and a performance rating

booking_rate_percent = order_duration_seconds / online_seconds * 100.
The rating comes from the booking rate; a therapist with no online time in
the window is "inactive".
"""

# Python Packages
from collections import defaultdict
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl import Girl, GirlWorkSession
from ...models.order import Order

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import as_utc, utc_now, format_datetime, parse_datetime, parse_paging, paginate_list





class AttendanceService:

    def list_attendance(self, args) -> dict:
        """
        Attendance rows, best booking rate first by default

        Args:
            args: start_date, end_date (default: last 7 days), search, city_id,
                  sort_by, sort_order, page, limit
        """

        start, end = self._window(args)
        page, limit = parse_paging(args)

        query = Girl.query.filter(Girl.is_blocked.is_(False))

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            if search.isdigit():
                query = query.filter(Girl.girl_number == int(search))
            else:
                query = query.filter(Girl.name.ilike(f"%{search}%"))

        if args.get("city_id"):
            try:
                query = query.filter(Girl.city_id == int(args.get("city_id")))
            except ValueError:
                raise ValidationException(messages.ERROR['INVALID_NUMBER'].format("city_id"))

        sort_by = args.get("sort_by") or "booking_rate_percent"
        if sort_by not in constants.ATTENDANCE_SORT_COLUMNS:
            raise ValidationException(
                messages.ERROR['INVALID_SORT_BY'].format(", ".join(constants.ATTENDANCE_SORT_COLUMNS))
            )

        girls = query.all()
        ids = [girl.id for girl in girls]

        online = self._online_seconds(ids, start, end)
        orders = self._order_totals(ids, start, end)

        rows = [self._row(girl, online.get(girl.id, 0), *orders.get(girl.id, (0, 0))) for girl in girls]

        descending = args.get("sort_order", "asc" if sort_by == "girl_number" else "desc") == "desc"
        rows.sort(key = lambda row: (row[sort_by], -row["girl_number"] if descending else row["girl_number"]),
                  reverse = descending)

        items, meta = paginate_list(rows, page, limit)

        return {
            "start": format_datetime(start),
            "end": format_datetime(end),
            "girls": items,
            "pagination": meta
        }



    def _window(self, args):
        try:
            start = parse_datetime(args.get("start_date"))
            end = parse_datetime(args.get("end_date"))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])

        end = end or utc_now()
        start = start or end - timedelta(days = constants.ATTENDANCE_DEFAULT_DAYS)

        if end <= start:
            raise ValidationException(messages.ERROR['INVALID_DATE_RANGE'])

        return start, end


    def _online_seconds(self, girl_ids: list, start, end) -> dict:
        if not girl_ids:
            return {}

        sessions = (
            GirlWorkSession.query
            .filter(
                GirlWorkSession.girl_id.in_(girl_ids),
                GirlWorkSession.started_at < end,
                or_(GirlWorkSession.ended_at.is_(None), GirlWorkSession.ended_at > start)
            )
            .all()
        )

        now = utc_now()
        seconds = defaultdict(float)

        for session in sessions:
            began = max(as_utc(session.started_at), start)
            ended = min(as_utc(session.ended_at) or now, end)

            if ended > began:
                seconds[session.girl_id] += (ended - began).total_seconds()

        return seconds


    def _order_totals(self, girl_ids: list, start, end) -> dict:
        """ girl_id -> (completed orders, service seconds)... """

        if not girl_ids:
            return {}

        rows = (
            db.session.query(Order.girl_id, Order.service_duration)
            .filter(
                Order.girl_id.in_(girl_ids),
                Order.status == "completed",
                Order.completed_at >= start,
                Order.completed_at < end
            )
            .all()
        )

        totals = {}
        for girl_id, minutes in rows:
            count, seconds = totals.get(girl_id, (0, 0))
            totals[girl_id] = (count + 1, seconds + (minutes or 0) * 60)

        return totals


    @staticmethod
    def _row(girl: Girl, online_seconds: float, order_count: int, order_seconds: int) -> dict:
        online_seconds = int(online_seconds)
        rate = round(order_seconds / online_seconds * 100, 1) if online_seconds else 0.0

        return {
            "girl_id": girl.id,
            "girl_number": girl.girl_number,
            "name": girl.name,
            "avatar_url": girl.avatar_url,
            "city_id": girl.city_id,
            "online_seconds": online_seconds,
            "order_count": order_count,
            "order_duration_seconds": order_seconds,
            "booking_rate_percent": rate,
            "performance_rating": AttendanceService.rating(online_seconds, rate)
        }


    @staticmethod
    def rating(online_seconds: int, rate: float) -> str:
        if not online_seconds:
            return "inactive"

        for threshold, label in constants.ATTENDANCE_RATINGS:
            if rate >= threshold:
                return label

        return "poor"
