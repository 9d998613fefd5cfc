"""
Binding Service

Handles:
    - Therapists of a service with their binding state
    - Batch bind (upsert, qualified)
    - Batch unbind (keeps the row, optionally switches the durations off)
    - Batch restore

An unbound therapist keeps her binding row with is_qualified = false so a
restore brings back her durations as they were.
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_, and_, func

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl import Girl
from ...models.service import Category, Service, GirlService, GirlServiceDuration

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, parse_paging, paginate

# Audit
from ...util.audit import record_audit_log

logger = logging.getLogger(__name__)





class BindingService:

    def _get_service(self, service_id: int) -> Service:
        service = Service.query.filter_by(id = service_id).first()

        if not service:
            raise NotFoundException(messages.ERROR['SERVICE_NOT_FOUND'])

        return service



    def list_girls(self, service_id: int, args) -> dict:
        """
        Therapists that are not blocked, with their binding to this service

        Args:
            args: search, city_id, category_id, bind_status, sort_by,
                  sort_order, page, limit
        """

        service = self._get_service(service_id)
        page, limit = parse_paging(args)

        query = (
            db.session.query(Girl, GirlService)
            .outerjoin(GirlService, and_(GirlService.girl_id == Girl.id, GirlService.service_id == service.id))
            .filter(Girl.is_blocked.is_(False))
        )

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            if search.isdigit():
                query = query.filter(Girl.girl_number == int(search))
            else:
                query = query.filter(or_(Girl.name.ilike(f"%{search}%"), Girl.username.ilike(f"%{search}%")))

        try:
            if args.get("city_id"):
                query = query.filter(Girl.city_id == int(args.get("city_id")))
            if args.get("category_id"):
                query = query.filter(Girl.categories.any(Category.id == int(args.get("category_id"))))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_NUMBER'].format("city_id / category_id"))

        bind_status = args.get("bind_status") or "all"
        if bind_status not in constants.BIND_STATUSES:
            raise ValidationException(messages.ERROR['INVALID_BIND_STATUS'])

        if bind_status == "bound-enabled":
            query = query.filter(GirlService.is_qualified.is_(True))
        elif bind_status == "bound-disabled":
            query = query.filter(GirlService.is_qualified.is_(False))
        elif bind_status == "unbound":
            query = query.filter(GirlService.id.is_(None))

        sort_by = args.get("sort_by") or "girl_number"
        if sort_by not in constants.BIND_SORT_COLUMNS:
            raise ValidationException(
                messages.ERROR['INVALID_SORT_BY'].format(", ".join(constants.BIND_SORT_COLUMNS))
            )

        column = getattr(Girl, sort_by)
        column = column.desc() if args.get("sort_order") == "desc" else column.asc()

        rows, meta = paginate(query.order_by(column, Girl.id), page, limit)
        counts = self._enabled_duration_counts([binding.id for girl, binding in rows if binding])

        return {
            "service_id": service.id,
            "girls": [self.serialize(girl, binding, counts) for girl, binding in rows],
            "pagination": meta
        }



    def _enabled_duration_counts(self, binding_ids: list) -> dict:
        if not binding_ids:
            return {}

        return dict(
            db.session.query(GirlServiceDuration.admin_girl_service_id, func.count(GirlServiceDuration.id))
            .filter(
                GirlServiceDuration.admin_girl_service_id.in_(binding_ids),
                GirlServiceDuration.is_active.is_(True)
            )
            .group_by(GirlServiceDuration.admin_girl_service_id)
            .all()
        )



    def _existing_girl_ids(self, girl_ids: list) -> list:
        found = {girl_id for (girl_id,) in db.session.query(Girl.id).filter(Girl.id.in_(girl_ids)).all()}
        missing = [girl_id for girl_id in girl_ids if girl_id not in found]

        if missing:
            raise NotFoundException(messages.ERROR['GIRL_NOT_FOUND'])

        return girl_ids


    def _bindings(self, service_id: int, girl_ids: list) -> list:
        return GirlService.query.filter(
            GirlService.service_id == service_id,
            GirlService.girl_id.in_(girl_ids)
        ).all()


    def _commit(self):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BINDING_UPDATE_FAILED",
                message = messages.ERROR['BINDING_UPDATE_FAILED'],
                details = str(errors)
            )



    def bind(self, operator, service_id: int, girl_ids: list) -> dict:
        """
        Bind therapists to a service (upsert, qualified)
        """

        service = self._get_service(service_id)
        self._existing_girl_ids(girl_ids)

        bindings = {binding.girl_id: binding for binding in self._bindings(service.id, girl_ids)}

        for girl_id in girl_ids:
            binding = bindings.get(girl_id)

            if not binding:
                binding = GirlService(girl_id = girl_id, service_id = service.id)
                db.session.add(binding)

            binding.is_qualified = True
            binding.admin_id = operator.id

        self._commit()

        logger.info("🔗 %s therapist(s) bound to service %s by %s", len(girl_ids), service.code, operator.id)
        record_audit_log(operator.id, "bind_service", "service", str(service.id), {"girl_ids": girl_ids})

        return {
            "service_id": service.id,
            "count": len(girl_ids),
            "message": messages.SUCCESS['GIRLS_BOUND'].format(len(girl_ids))
        }



    def unbind(self, operator, service_id: int, girl_ids: list, notes: str, disable_durations: bool = False) -> dict:
        """
        Mark bindings unqualified; therapists without a binding are skipped
        """

        service = self._get_service(service_id)
        bindings = self._bindings(service.id, girl_ids)

        for binding in bindings:
            binding.is_qualified = False
            binding.notes = notes
            binding.admin_id = operator.id

        if disable_durations and bindings:
            GirlServiceDuration.query.filter(
                GirlServiceDuration.admin_girl_service_id.in_([binding.id for binding in bindings])
            ).update({GirlServiceDuration.is_active: False}, synchronize_session = False)

        self._commit()

        logger.info("✂️ %s therapist(s) unbound from service %s by %s", len(bindings), service.code, operator.id)
        record_audit_log(
            operator.id, "unbind_service", "service", str(service.id),
            {"girl_ids": [binding.girl_id for binding in bindings], "disable_durations": bool(disable_durations)}
        )

        return {
            "service_id": service.id,
            "count": len(bindings),
            "message": messages.SUCCESS['GIRLS_UNBOUND'].format(len(bindings))
        }



    def restore(self, operator, service_id: int, girl_ids: list, notes: str = None) -> dict:
        service = self._get_service(service_id)
        bindings = self._bindings(service.id, girl_ids)

        for binding in bindings:
            binding.is_qualified = True
            binding.admin_id = operator.id
            if notes is not None:
                binding.notes = notes

        self._commit()

        record_audit_log(
            operator.id, "restore_service", "service", str(service.id),
            {"girl_ids": [binding.girl_id for binding in bindings]}
        )

        return {
            "service_id": service.id,
            "count": len(bindings),
            "message": messages.SUCCESS['GIRLS_RESTORED'].format(len(bindings))
        }



    @staticmethod
    def serialize(girl: Girl, binding: GirlService = None, counts: dict = None) -> dict:
        counts = counts or {}

        return {
            "id": girl.id,
            "girl_number": girl.girl_number,
            "name": girl.name,
            "username": girl.username,
            "avatar_url": girl.avatar_url,
            "city_id": girl.city_id,
            "is_verified": girl.is_verified,
            "binding": {
                "id": binding.id,
                "is_qualified": binding.is_qualified,
                "notes": binding.notes,
                "enabled_durations_count": counts.get(binding.id, 0),
                "updated_at": format_datetime(binding.updated_at)
            } if binding else None
        }
