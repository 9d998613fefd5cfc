"""
City Panel Service

Handles:
    - Online therapists of a partner city panel
    - Busy / available switch with a busy-until time

A panel belongs to one support account (matched by display name) and shows
the therapists of its city: aloha by city code, cbody by city id and the
partner sort order.
"""

# Python Packages
import logging
from datetime import timedelta

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl import City, Girl, GirlStatus

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ForbiddenException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now, format_datetime, parse_paging, paginate

logger = logging.getLogger(__name__)





class PanelService:

    def _panel(self, operator, panel: str) -> dict:
        config = constants.CITY_PANELS.get(panel)

        if not config:
            raise NotFoundException(messages.ERROR['PANEL_NOT_FOUND'])

        if operator.role != constants.ROLE_SUPPORT or operator.display_name != config["display_name"]:
            raise ForbiddenException("PANEL_FORBIDDEN", messages.ERROR['PANEL_FORBIDDEN'].format(panel))

        return config


    def _scope(self, config: dict):
        """ Therapists of the panel's city, not blocked... """

        city_id = config.get("city_id")

        if config.get("city_code"):
            city = City.query.filter_by(code = config["city_code"]).first()
            if not city:
                raise NotFoundException(messages.ERROR['PANEL_CITY_NOT_CONFIGURED'])
            city_id = city.id

        query = (
            db.session.query(Girl, GirlStatus)
            .outerjoin(GirlStatus, GirlStatus.girl_id == Girl.id)
            .filter(Girl.city_id == city_id, Girl.is_blocked.is_(False))
        )

        if config.get("sort_order") is not None:
            query = query.filter(Girl.sort_order == config["sort_order"])

        return query



    def list_girls(self, operator, panel: str, args) -> dict:
        """
        Available and busy therapists of the panel, by number
        """

        config = self._panel(operator, panel)
        page, limit = parse_paging(args)

        query = self._scope(config).filter(GirlStatus.status.in_(constants.PANEL_STATUSES))
        rows, meta = paginate(query.order_by(Girl.girl_number), page, limit)

        return {
            "panel": panel,
            "girls": [self.serialize(girl, status) for girl, status in rows],
            "pagination": meta
        }



    def toggle_busy(self, operator, panel: str, girl_id: str, minutes: int = None) -> dict:
        """
        busy -> available clears next_available_time;
        available -> busy sets it to now + minutes
        """

        config = self._panel(operator, panel)

        row = self._scope(config).filter(Girl.id == girl_id).first()
        if not row:
            raise NotFoundException(messages.ERROR['GIRL_NOT_IN_PANEL'])

        girl, status = row

        if not status or status.status not in constants.PANEL_STATUSES:
            raise ServiceException(
                error_code = "GIRL_OFFLINE",
                message = messages.ERROR['GIRL_OFFLINE'],
                status_code = 409
            )

        if status.status == "available" and minutes is None:
            raise ValidationException(
                messages.ERROR['INVALID_BUSY_MINUTES'].format(constants.PANEL_MAX_BUSY_MINUTES)
            )

        try:
            if status.status == "busy":
                status.status = "available"
                status.next_available_time = None
            else:
                status.status = "busy"
                status.next_available_time = utc_now() + timedelta(minutes = minutes)

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "STATUS_UPDATE_FAILED",
                message = messages.ERROR['STATUS_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("🔁 %s panel: therapist #%s is now %s", panel, girl.girl_number, status.status)

        data = self.serialize(girl, status)
        data["message"] = messages.SUCCESS['PANEL_STATUS_CHANGED'].format(status.status)

        return data



    @staticmethod
    def serialize(girl: Girl, status: GirlStatus = None) -> dict:
        return {
            "id": girl.id,
            "girl_number": girl.girl_number,
            "name": girl.name,
            "avatar_url": girl.avatar_url,
            "status": status.status if status else "offline",
            "next_available_time": format_datetime(status.next_available_time) if status else None
        }
