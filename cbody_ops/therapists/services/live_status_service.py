"""
Live Status Service

Handles:
    - Read a therapist's live status row
    - Upsert status, position and next available time
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.girl import Girl, GirlStatus

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now, format_datetime

logger = logging.getLogger(__name__)





class LiveStatusService:

    def _get_girl(self, girl_id: str) -> Girl:
        girl = Girl.query.filter_by(id = girl_id).first()

        if not girl:
            raise NotFoundException(messages.ERROR['GIRL_NOT_FOUND'])

        return girl



    def get_status(self, girl_id: str) -> dict:
        girl = self._get_girl(girl_id)
        status = GirlStatus.query.filter_by(girl_id = girl.id).first()

        return self.serialize(girl, status)



    def update_status(self, girl_id: str, data: dict) -> dict:
        """
        Upsert the live status row

        Args:
            data: cleaned fields from LiveStatusValidation
        """

        girl = self._get_girl(girl_id)

        try:
            status = GirlStatus.query.filter_by(girl_id = girl.id).first()

            if not status:
                status = GirlStatus(girl_id = girl.id, status = "offline")
                db.session.add(status)

            for key, value in data.items():
                setattr(status, key, value)

            if data.get("status") in ("available", "busy"):
                status.last_online_at = utc_now()

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "STATUS_UPDATE_FAILED",
                message = messages.ERROR['STATUS_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("📍 Therapist #%s status set to %s", girl.girl_number, status.status)

        data = self.serialize(girl, status)
        data["message"] = messages.SUCCESS['GIRL_STATUS_UPDATED']

        return data



    @staticmethod
    def serialize(girl: Girl, status: GirlStatus = None) -> dict:
        return {
            "girl_id": girl.id,
            "status": status.status if status else "offline",
            "current_lat": status.current_lat if status else None,
            "current_lng": status.current_lng if status else None,
            "next_available_time": format_datetime(status.next_available_time) if status else None,
            "cooldown_until_at": format_datetime(status.cooldown_until_at) if status else None,
            "last_online_at": format_datetime(status.last_online_at) if status else None,
            "updated_at": format_datetime(status.updated_at) if status else None
        }
