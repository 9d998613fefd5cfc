"""
Partner Girl Service

Therapists visible to partners: verified, not blocked, and pinned with a
sort_order of at least PARTNER_MIN_SORT_ORDER.
"""

# Constants
from ...base import constants

# Models
from ...models.girl import Girl

# Helpers
from ...util.helpers import format_datetime





class PartnerGirlService:

    def list_girls(self) -> list:
        girls = (
            Girl.query
            .filter(
                Girl.is_blocked.is_(False),
                Girl.is_verified.is_(True),
                Girl.sort_order >= constants.PARTNER_MIN_SORT_ORDER
            )
            .order_by(Girl.girl_number)
            .all()
        )

        return [self.serialize(girl) for girl in girls]



    @staticmethod
    def serialize(girl: Girl) -> dict:
        status = girl.live_status

        return {
            "id": girl.id,
            "girl_number": girl.girl_number,
            "city_id": girl.city_id,
            "username": girl.name,
            "avatar_url": girl.avatar_url,
            "lat": status.current_lat if status else None,
            "lng": status.current_lng if status else None,
            "status": status.status if status else "offline",
            "next_available_time": format_datetime(status.next_available_time) if status else None
        }
