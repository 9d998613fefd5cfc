"""
Manage Service Service

Handles:
    - Create / update service (unique code, known category)
    - Toggle service active flag
    - Create / update / toggle / delete durations (one per service and length)
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.service import Category, Service, ServiceDuration, GirlServiceDuration

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import to_decimal

# Audit
from ...util.audit import record_audit_log

# Validations
from ..validations.service_validation import DurationValidation

# Serializers
from .service_query_service import ServiceQueryService

logger = logging.getLogger(__name__)


MONEY_FIELDS = ("default_price", "min_price", "max_price")





class ManageServiceService:

    def _get_service(self, service_id: int) -> Service:
        service = Service.query.filter_by(id = service_id).first()

        if not service:
            raise NotFoundException(messages.ERROR['SERVICE_NOT_FOUND'])

        return service


    def _get_duration(self, duration_id: int) -> ServiceDuration:
        duration = ServiceDuration.query.filter_by(id = duration_id).first()

        if not duration:
            raise NotFoundException(messages.ERROR['DURATION_NOT_FOUND'])

        return duration


    def _check_code_free(self, code: str, service_id: int = None):
        query = Service.query.filter(Service.code == code)
        if service_id is not None:
            query = query.filter(Service.id != service_id)

        if query.first():
            raise ServiceException(
                error_code = "SERVICE_CODE_TAKEN",
                message = messages.ERROR['SERVICE_CODE_TAKEN'].format(code),
                status_code = 409
            )


    def _check_category(self, category_id: int):
        if not Category.query.filter_by(id = category_id).first():
            raise NotFoundException(messages.ERROR['CATEGORY_NOT_FOUND'])


    def _check_minutes_free(self, service_id: int, minutes: int, duration_id: int = None):
        query = ServiceDuration.query.filter(
            ServiceDuration.service_id == service_id,
            ServiceDuration.duration_minutes == minutes
        )
        if duration_id is not None:
            query = query.filter(ServiceDuration.id != duration_id)

        if query.first():
            raise ServiceException(
                error_code = "DURATION_TAKEN",
                message = messages.ERROR['DURATION_TAKEN'].format(minutes),
                status_code = 409
            )


    def _commit(self):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "SERVICE_UPDATE_FAILED",
                message = messages.ERROR['SERVICE_UPDATE_FAILED'],
                details = str(errors)
            )



    # Services
    def create_service(self, operator, data: dict) -> dict:
        """
        Create a service

        Args:
            operator: AdminProfile
            data: cleaned fields from ServiceValidation
        """

        self._check_code_free(data["code"])
        self._check_category(data["category_id"])

        data.setdefault("sort_order", constants.DEFAULT_SORT_ORDER)

        service = Service(**data)
        db.session.add(service)
        self._commit()

        logger.info("🧾 Service %s created by %s", service.code, operator.id)
        record_audit_log(operator.id, "create_service", "service", str(service.id), {"code": service.code})

        return {
            "service": ServiceQueryService.serialize(service),
            "message": messages.SUCCESS['SERVICE_CREATED']
        }



    def update_service(self, operator, service_id: int, data: dict) -> dict:
        service = self._get_service(service_id)

        if "code" in data and data["code"] != service.code:
            self._check_code_free(data["code"], service.id)

        if "category_id" in data and data["category_id"] != service.category_id:
            self._check_category(data["category_id"])

        for key, value in data.items():
            setattr(service, key, value)

        self._commit()
        record_audit_log(operator.id, "update_service", "service", str(service.id), {"fields": sorted(data)})

        return {
            "service": ServiceQueryService.serialize(service),
            "message": messages.SUCCESS['SERVICE_UPDATED']
        }



    def toggle_service(self, service_id: int) -> dict:
        service = self._get_service(service_id)

        service.is_active = not service.is_active
        self._commit()

        return {
            "id": service.id,
            "is_active": service.is_active,
            "message": messages.SUCCESS['SERVICE_UPDATED']
        }



    # Durations
    def create_duration(self, service_id: int, data: dict) -> dict:
        service = self._get_service(service_id)
        self._check_minutes_free(service.id, data["duration_minutes"])

        duration = ServiceDuration(service_id = service.id, **self._money(data))
        db.session.add(duration)
        self._commit()

        return {
            "duration": ServiceQueryService.serialize_duration(duration),
            "message": messages.SUCCESS['DURATION_CREATED']
        }



    def update_duration(self, duration_id: int, data: dict) -> dict:
        duration = self._get_duration(duration_id)
        DurationValidation().check_price_order(data, duration)

        if "duration_minutes" in data and data["duration_minutes"] != duration.duration_minutes:
            self._check_minutes_free(duration.service_id, data["duration_minutes"], duration.id)

        for key, value in self._money(data).items():
            setattr(duration, key, value)

        self._commit()

        return {
            "duration": ServiceQueryService.serialize_duration(duration),
            "message": messages.SUCCESS['DURATION_UPDATED']
        }



    def toggle_duration(self, duration_id: int) -> dict:
        duration = self._get_duration(duration_id)

        duration.is_active = not duration.is_active
        self._commit()

        return {
            "id": duration.id,
            "is_active": duration.is_active,
            "message": messages.SUCCESS['DURATION_UPDATED']
        }



    def delete_duration(self, operator, duration_id: int) -> dict:
        """
        Delete a duration together with the therapists' copies of it
        """

        duration = self._get_duration(duration_id)
        service_id = duration.service_id
        minutes = duration.duration_minutes

        GirlServiceDuration.query.filter(
            GirlServiceDuration.service_duration_id == duration.id
        ).delete(synchronize_session = False)

        db.session.delete(duration)
        self._commit()

        record_audit_log(
            operator.id, "delete_service_duration", "service", str(service_id), {"duration_minutes": minutes}
        )

        return {
            "id": duration_id,
            "message": messages.SUCCESS['DURATION_DELETED']
        }



    @staticmethod
    def _money(data: dict) -> dict:
        return {
            key: to_decimal(value) if key in MONEY_FIELDS and value is not None else value
            for key, value in data.items()
        }
