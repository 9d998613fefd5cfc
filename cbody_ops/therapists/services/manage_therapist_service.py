"""
Manage Therapist Service

Handles:
    - Set / cancel cooldown
    - Toggle blocked and verified flags
"""

# Python Packages
import logging
from datetime import timedelta

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





class ManageTherapistService:

    def _get_girl(self, girl_id: str) -> Girl:
        girl = Girl.query.filter_by(id = girl_id).first()

        if not girl:
            raise NotFoundException(messages.ERROR['GIRL_NOT_FOUND'])

        return girl


    def _get_status(self, girl: Girl) -> GirlStatus:
        status = GirlStatus.query.filter_by(girl_id = girl.id).first()

        if not status:
            status = GirlStatus(girl_id = girl.id, status = "offline")
            db.session.add(status)

        return status



    def set_cooldown(self, girl_id: str, hours: float) -> dict:
        """
        Take a therapist offline until now + hours
        """

        girl = self._get_girl(girl_id)

        try:
            status = self._get_status(girl)
            status.cooldown_until_at = utc_now() + timedelta(hours = hours)
            status.status = "offline"
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "COOLDOWN_UPDATE_FAILED",
                message = messages.ERROR['COOLDOWN_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("⏸️ Therapist #%s in cooldown for %sh", girl.girl_number, hours)

        return {
            "girl_id": girl.id,
            "status": status.status,
            "cooldown_until_at": format_datetime(status.cooldown_until_at),
            "message": messages.SUCCESS['COOLDOWN_SET']
        }



    def cancel_cooldown(self, girl_id: str) -> dict:
        girl = self._get_girl(girl_id)

        try:
            status = self._get_status(girl)
            status.cooldown_until_at = None
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "COOLDOWN_UPDATE_FAILED",
                message = messages.ERROR['COOLDOWN_UPDATE_FAILED'],
                details = str(errors)
            )

        return {
            "girl_id": girl.id,
            "cooldown_until_at": None,
            "message": messages.SUCCESS['COOLDOWN_CANCELLED']
        }



    def toggle_flag(self, girl_id: str, flag: str) -> dict:
        """
        Flip is_blocked or is_verified
        """

        girl = self._get_girl(girl_id)

        try:
            setattr(girl, flag, not getattr(girl, flag))

            # A blocked therapist cannot stay online
            if flag == "is_blocked" and girl.is_blocked:
                self._get_status(girl).status = "offline"

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "GIRL_UPDATE_FAILED",
                message = messages.ERROR['GIRL_UPDATE_FAILED'],
                details = str(errors)
            )

        return {
            "girl_id": girl.id,
            flag: getattr(girl, flag),
            "message": messages.SUCCESS['GIRL_UPDATED']
        }
