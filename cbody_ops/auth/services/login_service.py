"""
Login Service

Handles:
    - Password sign-in through the auth provider
    - Admin profile gate (exists and active)
"""

# Python Packages
import logging

# Models
from ...models.admin_profile import AdminProfile

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import ForbiddenException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime

logger = logging.getLogger(__name__)





class LoginService:

    def login(self, email: str, password: str) -> dict:
        """
        Sign in an admin

        Returns:
            dict: tokens and admin profile
        """

        session = factory.get_auth_client().sign_in_with_password(email.strip(), password)
        user_id = (session.get("user") or {}).get("id")

        profile = AdminProfile.query.filter_by(id = user_id).first()

        if not profile:
            logger.warning("🚫 Login by non-admin user %s", user_id)
            raise ForbiddenException("NOT_ADMIN", messages.ERROR["NOT_ADMIN"])

        if not profile.is_active:
            logger.warning("🚫 Login by disabled admin %s", user_id)
            raise ForbiddenException("ADMIN_DISABLED", messages.ERROR["ADMIN_DISABLED"])

        logger.info("🔑 Admin %s signed in", profile.id)

        return {
            "access_token": session.get("access_token"),
            "refresh_token": session.get("refresh_token"),
            "expires_in": session.get("expires_in"),
            "admin": serialize_admin(profile)
        }



def serialize_admin(profile: AdminProfile) -> dict:
    """ Admin profile in API shape... """

    return {
        "id": profile.id,
        "display_name": profile.display_name,
        "role": profile.role,
        "is_active": profile.is_active,
        "created_at": format_datetime(profile.created_at),
        "updated_at": format_datetime(profile.updated_at)
    }
