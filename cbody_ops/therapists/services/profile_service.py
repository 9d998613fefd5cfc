"""
Therapist Profile Service

Handles:
    - Active cities and categories for the profile form
    - Profile list (search, filters, sort, paging) and detail
    - Create / update profile (unique number and username, known city
      and categories)
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_, func

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl import City, Girl
from ...models.service import Category

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, to_float, parse_bool, parse_paging, paginate

# Audit
from ...util.audit import record_audit_log

logger = logging.getLogger(__name__)





class ProfileService:

    def list_cities(self) -> dict:
        cities = City.query.filter(City.is_active.is_(True)).order_by(City.sort_order, City.id).all()

        return {
            "cities": [
                {"id": city.id, "code": city.code, "name": city.name, "sort_order": city.sort_order}
                for city in cities
            ]
        }


    def list_categories(self) -> dict:
        categories = Category.query.filter(Category.is_active.is_(True)).order_by(Category.sort_order, Category.id).all()

        return {
            "categories": [
                {"id": category.id, "code": category.code, "name": category.name}
                for category in categories
            ]
        }



    def list_girls(self, args) -> dict:
        """
        Fetch therapist profiles, newest first by default

        Args:
            args: search, city_id, category_id, is_verified, is_blocked, badge,
                  sort_by, sort_order, page, limit
        """

        page, limit = parse_paging(args)
        query = Girl.query

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            pattern = f"%{search}%"
            conditions = [Girl.name.ilike(pattern), Girl.username.ilike(pattern)]
            if search.isdigit():
                conditions.append(Girl.girl_number == int(search))
            query = query.filter(or_(*conditions))

        try:
            if args.get("city_id"):
                query = query.filter(Girl.city_id == int(args.get("city_id")))
            if args.get("category_id"):
                query = query.filter(Girl.categories.any(Category.id == int(args.get("category_id"))))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_NUMBER'].format("city_id / category_id"))

        for flag in ("is_verified", "is_blocked"):
            value = parse_bool(args.get(flag))
            if value is not None:
                query = query.filter(getattr(Girl, flag).is_(value))

        if args.get("badge"):
            query = query.filter(Girl.badge == args.get("badge"))

        sort_by = args.get("sort_by") or "created_at"
        if sort_by not in constants.GIRL_SORT_COLUMNS:
            raise ValidationException(
                messages.ERROR['INVALID_SORT_BY'].format(", ".join(constants.GIRL_SORT_COLUMNS))
            )

        column = getattr(Girl, sort_by)
        column = column.asc() if args.get("sort_order") == "asc" else column.desc()

        girls, meta = paginate(query.order_by(column, Girl.girl_number), page, limit)

        return {
            "girls": [self.serialize(girl) for girl in girls],
            "pagination": meta
        }



    def get_girl(self, girl_id: str) -> dict:
        return self.serialize(self._get_girl(girl_id))


    def _get_girl(self, girl_id: str) -> Girl:
        girl = Girl.query.filter_by(id = girl_id).first()

        if not girl:
            raise NotFoundException(messages.ERROR['GIRL_NOT_FOUND'])

        return girl



    def _check_unique(self, data: dict, girl_id: str = None):
        checks = (
            ("girl_number", Girl.girl_number, "GIRL_NUMBER_TAKEN"),
            ("username", Girl.username, "USERNAME_TAKEN")
        )

        for key, column, error_code in checks:
            if data.get(key) is None:
                continue

            query = Girl.query.filter(column == data[key])
            if girl_id:
                query = query.filter(Girl.id != girl_id)

            if query.first():
                raise ServiceException(
                    error_code = error_code,
                    message = messages.ERROR[error_code].format(data[key]),
                    status_code = 409
                )


    def _resolve_links(self, data: dict) -> dict:
        """ City must exist; category ids become Category rows... """

        if "city_id" in data and not City.query.filter_by(id = data["city_id"]).first():
            raise NotFoundException(messages.ERROR['CITY_NOT_FOUND'])

        if "category_ids" in data:
            ids = data.pop("category_ids")
            categories = Category.query.filter(Category.id.in_(ids)).all()

            if len(categories) != len(ids):
                raise NotFoundException(messages.ERROR['CATEGORY_NOT_FOUND'])

            data["categories"] = categories

        return data


    def _commit(self, error_code: str):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = error_code,
                message = messages.ERROR[error_code],
                details = str(errors)
            )



    def create_girl(self, operator, data: dict) -> dict:
        """
        Create a therapist profile; girl_number defaults to the next free one
        """

        self._check_unique(data)
        data = self._resolve_links(data)

        if data.get("girl_number") is None:
            data["girl_number"] = (db.session.query(func.max(Girl.girl_number)).scalar() or 0) + 1

        data.setdefault("trust_score", constants.GIRL_DEFAULT_TRUST_SCORE)
        data.setdefault("sort_order", constants.DEFAULT_SORT_ORDER)

        girl = Girl(**data)
        db.session.add(girl)
        self._commit("GIRL_CREATE_FAILED")

        logger.info("👤 Therapist #%s created by %s", girl.girl_number, operator.id)
        record_audit_log(operator.id, "create_girl", "girl", girl.id, {"girl_number": girl.girl_number})

        return {
            "girl": self.serialize(girl),
            "message": messages.SUCCESS['GIRL_CREATED']
        }



    def update_girl(self, operator, girl_id: str, data: dict) -> dict:
        girl = self._get_girl(girl_id)

        self._check_unique(data, girl.id)
        data = self._resolve_links(data)

        for key, value in data.items():
            setattr(girl, key, value)

        self._commit("GIRL_UPDATE_FAILED")
        record_audit_log(operator.id, "update_girl", "girl", girl.id, {"fields": sorted(data)})

        return {
            "girl": self.serialize(girl),
            "message": messages.SUCCESS['GIRL_UPDATED']
        }



    @staticmethod
    def serialize(girl: Girl) -> dict:
        return {
            "id": girl.id,
            "girl_number": girl.girl_number,
            "username": girl.username,
            "name": girl.name,
            "profile": girl.profile,
            "tags": girl.tags,
            "avatar_url": girl.avatar_url,
            "birth_date": girl.birth_date.isoformat() if girl.birth_date else None,
            "height": girl.height,
            "weight": girl.weight,
            "measurements": girl.measurements,
            "gender": girl.gender,
            "languages": girl.languages,
            "badge": girl.badge,
            "rating": to_float(girl.rating),
            "total_sales": girl.total_sales,
            "max_travel_distance": girl.max_travel_distance,
            "trust_score": girl.trust_score,
            "is_verified": girl.is_verified,
            "is_blocked": girl.is_blocked,
            "is_visible_to_thai": girl.is_visible_to_thai,
            "sort_order": girl.sort_order,
            "city_id": girl.city_id,
            "city_name": girl.city.name if girl.city else None,
            "category_ids": sorted(category.id for category in girl.categories),
            "created_at": format_datetime(girl.created_at),
            "updated_at": format_datetime(girl.updated_at)
        }
