"""
List User Service

Handles:
    - Customer list with search, filters, sort and paging
    - Customer detail with recent logins
"""

# SQLAlchemy
from sqlalchemy import or_, func

# Database
from ...config.database import db

# Models
from ...models.user_profile import UserProfile, UserLoginEvent

# Exceptions
from ...util.exceptions import NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, parse_datetime, parse_bool, parse_paging, paginate


SORT_COLUMNS = {
    "created_at": UserProfile.created_at,
    "level": UserProfile.level,
    "credit_score": UserProfile.credit_score
}





class ListUserService:

    def list_users(self, args) -> dict:
        """
        Fetch customer list

        Args:
            args: query args (search, country_code, language_code, is_banned,
                  level, date_from, date_to, sort_by, sort_order, page, limit)

        Returns:
            dict
        """

        page, limit = parse_paging(args)

        last_login = (
            db.session.query(
                UserLoginEvent.user_id.label("user_id"),
                func.max(UserLoginEvent.logged_at).label("last_login_at")
            )
            .group_by(UserLoginEvent.user_id)
            .subquery()
        )

        query = (
            db.session.query(UserProfile, last_login.c.last_login_at)
            .outerjoin(last_login, last_login.c.user_id == UserProfile.id)
        )

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            query = query.filter(
                or_(
                    UserProfile.display_name.ilike(f"%{search}%"),
                    UserProfile.username.ilike(f"%{search}%")
                )
            )

        if args.get("country_code"):
            query = query.filter(UserProfile.country_code == args.get("country_code"))

        if args.get("language_code"):
            query = query.filter(UserProfile.language_code == args.get("language_code"))

        is_banned = parse_bool(args.get("is_banned"))
        if is_banned is not None:
            query = query.filter(UserProfile.is_banned == is_banned)

        if args.get("level"):
            try:
                query = query.filter(UserProfile.level == int(args.get("level")))
            except ValueError:
                raise ValidationException(messages.ERROR['INVALID_RANGE'].format("level", 1, 10))

        try:
            date_from = parse_datetime(args.get("date_from"))
            date_to = parse_datetime(args.get("date_to"))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])

        if date_from:
            query = query.filter(UserProfile.created_at >= date_from)
        if date_to:
            query = query.filter(UserProfile.created_at <= date_to)

        # Sort
        column = SORT_COLUMNS.get(args.get("sort_by"), UserProfile.created_at)
        column = column.asc() if args.get("sort_order") == "asc" else column.desc()

        rows, meta = paginate(query.order_by(column, UserProfile.id), page, limit)

        return {
            "users": [self.serialize(user, last_login_at) for user, last_login_at in rows],
            "pagination": meta
        }


    def get_user(self, user_id: str) -> dict:
        """
        Customer detail with the 20 latest logins
        """

        user = UserProfile.query.filter_by(id = user_id).first()

        if not user:
            raise NotFoundException(messages.ERROR['USER_NOT_FOUND'])

        logins = (
            UserLoginEvent.query
            .filter_by(user_id = user_id)
            .order_by(UserLoginEvent.logged_at.desc())
            .limit(20)
            .all()
        )

        data = self.serialize(user, logins[0].logged_at if logins else None)
        data["recent_logins"] = [
            {
                "ip_address": login.ip_address,
                "device_info": login.device_info,
                "logged_at": format_datetime(login.logged_at)
            }
            for login in logins
        ]

        return data


    @staticmethod
    def serialize(user: UserProfile, last_login_at = None) -> dict:
        return {
            "id": user.id,
            "display_name": user.display_name,
            "username": user.username,
            "avatar_url": user.avatar_url,
            "country_code": user.country_code,
            "language_code": user.language_code,
            "timezone": user.timezone,
            "level": user.level,
            "credit_score": user.credit_score,
            "is_banned": user.is_banned,
            "last_login_at": format_datetime(last_login_at),
            "created_at": format_datetime(user.created_at),
            "updated_at": format_datetime(user.updated_at)
        }
