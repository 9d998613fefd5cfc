"""
Manage User Service

Handles:
    - Update customer profile (audited field by field)
    - Toggle ban
    - Reset password through the auth provider
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.user_profile import UserProfile

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Audit
from ...util.audit import record_admin_operation

# Serializer
from .list_user_service import ListUserService

logger = logging.getLogger(__name__)





class ManageUserService:

    def _get_user(self, user_id: str) -> UserProfile:
        user = UserProfile.query.filter_by(id = user_id).first()

        if not user:
            raise NotFoundException(messages.ERROR['USER_NOT_FOUND'])

        return user



    def update_profile(self, operator, user_id: str, updates: dict) -> dict:
        """
        Apply validated field updates

        Only fields whose value actually changes are written and audited.
        """

        user = self._get_user(user_id)

        changes = {}
        previous_values = {}

        for key, value in updates.items():
            if isinstance(value, str) and key in ("display_name", "username"):
                value = value.strip()

            if getattr(user, key) != value:
                previous_values[key] = getattr(user, key)
                changes[key] = value

        if not changes:
            return {
                "user": ListUserService.serialize(user),
                "changed": [],
                "message": messages.SUCCESS['NOTHING_CHANGED']
            }

        try:
            for key, value in changes.items():
                setattr(user, key, value)

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "USER_UPDATE_FAILED",
                message = messages.ERROR['USER_UPDATE_FAILED'],
                details = str(errors)
            )

        record_admin_operation(
            operator_id = operator.id,
            target_id = user.id,
            operation_type = "update_user_profile",
            details = {
                "target_user_id": user.id,
                "changes": changes,
                "previous_values": previous_values
            }
        )

        return {
            "user": ListUserService.serialize(user),
            "changed": sorted(changes),
            "message": messages.SUCCESS['USER_UPDATED']
        }



    def toggle_ban(self, operator, user_id: str, reason: str = None) -> dict:
        """
        Flip is_banned
        """

        user = self._get_user(user_id)

        try:
            user.is_banned = not user.is_banned
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "USER_UPDATE_FAILED",
                message = messages.ERROR['USER_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("🔁 Customer %s banned=%s", user.id, user.is_banned)

        record_admin_operation(
            operator_id = operator.id,
            target_id = user.id,
            operation_type = "toggle_user_ban",
            details = {
                "target_user_id": user.id,
                "is_banned": user.is_banned,
                "reason": reason
            }
        )

        return {
            "id": user.id,
            "is_banned": user.is_banned,
            "message": messages.SUCCESS['USER_BANNED' if user.is_banned else 'USER_UNBANNED']
        }



    def reset_password(self, operator, user_id: str, new_password: str) -> dict:
        """
        Set a new customer password
        """

        user = self._get_user(user_id)

        factory.get_auth_client().admin_update_user(user.id, {"password": new_password})

        record_admin_operation(
            operator_id = operator.id,
            target_id = user.id,
            operation_type = "reset_user_password",
            details = {"target_user_id": user.id}
        )

        return {"id": user.id, "message": messages.SUCCESS['PASSWORD_RESET']}
