"""
Therapist Query Service

Handles:
    - Live status stats
    - Monitoring list with current orders
    - Online hours from work sessions
"""

# Python Packages
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import or_, case, func

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl import Girl, GirlStatus, GirlWorkSession
from ...models.order import Order

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import (
    as_utc,
    utc_now,
    today_start_utc,
    format_datetime,
    to_float,
    parse_bool,
    parse_list,
    parse_paging,
    paginate
)


STATUS_ORDER = case(
    (GirlStatus.status == "available", 0),
    (GirlStatus.status == "busy", 1),
    else_ = 2
)





class TherapistQueryService:

    def _listed_girls(self):
        """ Verified and not blocked... """

        return (
            db.session.query(Girl, GirlStatus)
            .outerjoin(GirlStatus, GirlStatus.girl_id == Girl.id)
            .filter(Girl.is_verified.is_(True), Girl.is_blocked.is_(False))
        )



    def get_stats(self) -> dict:
        """
        Counts by live status and today's online rate
        """

        rows = (
            db.session.query(func.coalesce(GirlStatus.status, "offline"), func.count(Girl.id))
            .select_from(Girl)
            .outerjoin(GirlStatus, GirlStatus.girl_id == Girl.id)
            .filter(Girl.is_verified.is_(True), Girl.is_blocked.is_(False))
            .group_by(func.coalesce(GirlStatus.status, "offline"))
            .all()
        )

        counts = {status: 0 for status in constants.GIRL_STATUSES}
        for status, count in rows:
            counts[status] = counts.get(status, 0) + count

        total = sum(counts.values())
        today_start = today_start_utc()

        online_today = (
            db.session.query(func.count(func.distinct(GirlWorkSession.girl_id)))
            .join(Girl, Girl.id == GirlWorkSession.girl_id)
            .filter(
                Girl.is_verified.is_(True),
                Girl.is_blocked.is_(False),
                or_(GirlWorkSession.ended_at.is_(None), GirlWorkSession.ended_at >= today_start)
            )
            .scalar()
        ) or 0

        return {
            "online": counts["available"],
            "busy": counts["busy"],
            "offline": counts["offline"],
            "total": total,
            "online_today": online_today,
            "today_online_rate": round(online_today / total * 100) if total else 0
        }



    def list_monitoring(self, args) -> dict:
        """
        Therapist monitoring list

        Args:
            args: search, status (list), city_id, only_abnormal, page, limit
        """

        page, limit = parse_paging(args, default_limit = constants.MONITORING_PAGE_SIZE)
        query = self._listed_girls()
        now = utc_now()

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            if search.isdigit():
                query = query.filter(Girl.girl_number == int(search))
            else:
                query = query.filter(
                    or_(Girl.name.ilike(f"%{search}%"), Girl.username.ilike(f"%{search}%"))
                )

        if parse_bool(args.get("only_abnormal")):
            query = query.filter(GirlStatus.cooldown_until_at > now)
        else:
            statuses = parse_list(args, "status") or ["available", "busy"]
            if "offline" in statuses:
                query = query.filter(or_(GirlStatus.status.in_(statuses), GirlStatus.status.is_(None)))
            else:
                query = query.filter(GirlStatus.status.in_(statuses))

        if args.get("city_id"):
            query = query.filter(Girl.city_id == int(args.get("city_id")))

        rows, meta = paginate(query.order_by(STATUS_ORDER, Girl.girl_number), page, limit)

        busy_ids = [girl.id for girl, status in rows if status and status.status == "busy"]
        current_orders = self._current_orders(busy_ids)

        items = []
        for girl, status in rows:
            item = self.serialize(girl, status, now)
            item["current_order"] = current_orders.get(girl.id)
            items.append(item)

        return {"girls": items, "pagination": meta}



    def _current_orders(self, girl_ids: list) -> dict:
        if not girl_ids:
            return {}

        orders = (
            Order.query
            .filter(Order.girl_id.in_(girl_ids), Order.status.in_(constants.ORDER_ACTIVE_STATUSES))
            .order_by(Order.created_at.desc())
            .all()
        )

        current = {}
        for order in orders:
            current.setdefault(order.girl_id, {
                "id": order.id,
                "order_number": order.order_number,
                "status": order.status,
                "service_duration": order.service_duration,
                "total_amount": to_float(order.total_amount),
                "scheduled_start_at": format_datetime(order.scheduled_start_at)
            })

        return current



    def get_work_stats(self, girl_id: str) -> dict:
        """
        Online hours today / 7 days / 30 days / all time
        """

        girl = Girl.query.filter_by(id = girl_id).first()
        if not girl:
            raise NotFoundException(messages.ERROR['GIRL_NOT_FOUND'])

        now = utc_now()
        windows = {
            "today_hours": today_start_utc(now),
            "week_hours": now - timedelta(days = 7),
            "month_hours": now - timedelta(days = 30),
            "total_hours": None
        }
        seconds = {key: 0.0 for key in windows}

        sessions = GirlWorkSession.query.filter_by(girl_id = girl_id).all()

        for session in sessions:
            started = as_utc(session.started_at)
            ended = as_utc(session.ended_at) or now

            for key, window_start in windows.items():
                start = max(started, window_start) if window_start else started
                if ended > start:
                    seconds[key] += (ended - start).total_seconds()

        stats = {key: round(value / 3600, 1) for key, value in seconds.items()}
        stats["girl_id"] = girl_id
        stats["sessions"] = len(sessions)

        return stats



    @staticmethod
    def serialize(girl: Girl, status: GirlStatus = None, now = None) -> dict:
        now = now or utc_now()
        cooldown_until = as_utc(status.cooldown_until_at) if status else None

        return {
            "id": girl.id,
            "girl_number": girl.girl_number,
            "name": girl.name,
            "username": girl.username,
            "avatar_url": girl.avatar_url,
            "city_id": girl.city_id,
            "city_name": girl.city.name if girl.city else None,
            "is_verified": girl.is_verified,
            "is_blocked": girl.is_blocked,
            "status": status.status if status else "offline",
            "lat": status.current_lat if status else None,
            "lng": status.current_lng if status else None,
            "next_available_time": format_datetime(status.next_available_time) if status else None,
            "cooldown_until_at": format_datetime(cooldown_until),
            "in_cooldown": bool(cooldown_until and cooldown_until > now),
            "last_online_at": format_datetime(status.last_online_at) if status else None
        }
