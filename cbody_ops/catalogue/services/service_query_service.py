"""
Service Query Service

Handles:
    - Active categories
    - Service list (search, category, active flag, sort, paging)
    - Service detail with its active durations
    - Duration list of a service
"""

# SQLAlchemy
from sqlalchemy import or_, cast, String

# Constants
from ...base import constants

# Models
from ...models.service import Category, Service, ServiceDuration

# Exceptions
from ...util.exceptions import NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, to_float, parse_bool, parse_paging, paginate





class ServiceQueryService:

    def list_categories(self) -> dict:
        categories = (
            Category.query
            .filter(Category.is_active.is_(True))
            .order_by(Category.sort_order, Category.id)
            .all()
        )

        return {"categories": [self.serialize_category(category) for category in categories]}



    def list_services(self, args) -> dict:
        """
        Fetch services, sort_order ascending by default

        Args:
            args: search (code or title), category_id, is_active, sort_by,
                  sort_order (asc | desc), page, limit
        """

        page, limit = parse_paging(args)
        query = Service.query

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Service.code.ilike(pattern), cast(Service.title, String).ilike(pattern)))

        if args.get("category_id"):
            try:
                query = query.filter(Service.category_id == int(args.get("category_id")))
            except ValueError:
                raise ValidationException(messages.ERROR['INVALID_NUMBER'].format("category_id"))

        is_active = parse_bool(args.get("is_active"))
        if is_active is not None:
            query = query.filter(Service.is_active.is_(is_active))

        sort_by = args.get("sort_by") or "sort_order"
        if sort_by not in constants.SERVICE_SORT_COLUMNS:
            raise ValidationException(
                messages.ERROR['INVALID_SORT_BY'].format(", ".join(constants.SERVICE_SORT_COLUMNS))
            )

        column = getattr(Service, sort_by)
        column = column.desc() if args.get("sort_order") == "desc" else column.asc()

        services, meta = paginate(query.order_by(column, Service.id), page, limit)

        return {
            "services": [self.serialize(service) for service in services],
            "pagination": meta
        }



    def get_service(self, service_id: int) -> dict:
        """
        Service detail with active durations, shortest first
        """

        service = self._get_service(service_id)

        durations = (
            ServiceDuration.query
            .filter(ServiceDuration.service_id == service.id, ServiceDuration.is_active.is_(True))
            .order_by(ServiceDuration.duration_minutes)
            .all()
        )

        data = self.serialize(service)
        data["durations"] = [self.serialize_duration(duration) for duration in durations]

        return data



    def list_durations(self, service_id: int) -> dict:
        service = self._get_service(service_id)

        durations = (
            ServiceDuration.query
            .filter(ServiceDuration.service_id == service.id)
            .order_by(ServiceDuration.duration_minutes)
            .all()
        )

        return {
            "service_id": service.id,
            "durations": [self.serialize_duration(duration) for duration in durations]
        }



    def _get_service(self, service_id: int) -> Service:
        service = Service.query.filter_by(id = service_id).first()

        if not service:
            raise NotFoundException(messages.ERROR['SERVICE_NOT_FOUND'])

        return service



    @staticmethod
    def serialize_category(category: Category) -> dict:
        return {
            "id": category.id,
            "code": category.code,
            "name": category.name,
            "sort_order": category.sort_order
        }


    @staticmethod
    def serialize(service: Service) -> dict:
        return {
            "id": service.id,
            "code": service.code,
            "category_id": service.category_id,
            "category_name": service.category.name if service.category else None,
            "title": service.title,
            "description": service.description,
            "badge": service.badge,
            "is_active": service.is_active,
            "is_visible_to_thai": service.is_visible_to_thai,
            "is_visible_to_english": service.is_visible_to_english,
            "min_user_level": service.min_user_level,
            "total_sales": service.total_sales,
            "sort_order": service.sort_order,
            "created_at": format_datetime(service.created_at),
            "updated_at": format_datetime(service.updated_at)
        }


    @staticmethod
    def serialize_duration(duration: ServiceDuration) -> dict:
        return {
            "id": duration.id,
            "service_id": duration.service_id,
            "duration_minutes": duration.duration_minutes,
            "default_price": to_float(duration.default_price),
            "min_price": to_float(duration.min_price),
            "max_price": to_float(duration.max_price),
            "is_active": duration.is_active,
            "updated_at": format_datetime(duration.updated_at)
        }
