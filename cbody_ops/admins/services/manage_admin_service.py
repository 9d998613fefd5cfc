"""
Manage Admin Service

Handles:
    - Update display name
    - Reset password
    - Toggle active status (never on yourself)
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.admin_profile import AdminProfile

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Audit
from ...util.audit import record_admin_operation

# Serializers
from ...auth.services.login_service import serialize_admin

logger = logging.getLogger(__name__)





class ManageAdminService:

    def _get_admin(self, admin_id: str) -> AdminProfile:
        admin = AdminProfile.query.filter_by(id = admin_id).first()

        if not admin:
            raise NotFoundException(messages.ERROR['ADMIN_NOT_FOUND'])

        return admin



    def update_display_name(self, operator, admin_id: str, display_name: str) -> dict:
        """
        Rename an admin
        """

        admin = self._get_admin(admin_id)
        old_name = admin.display_name
        new_name = display_name.strip()

        try:
            admin.display_name = new_name
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ADMIN_UPDATE_FAILED",
                message = messages.ERROR['ADMIN_UPDATE_FAILED'],
                details = str(errors)
            )

        record_admin_operation(
            operator_id = operator.id,
            target_id = admin.id,
            operation_type = "update_admin_profile",
            details = {
                "changes": {"display_name": new_name},
                "previous_values": {"display_name": old_name}
            }
        )

        return {
            "admin": serialize_admin(admin),
            "message": messages.SUCCESS['ADMIN_UPDATED']
        }



    def reset_password(self, operator, admin_id: str, new_password: str) -> dict:
        """
        Set a new password through the auth provider
        """

        admin = self._get_admin(admin_id)

        factory.get_auth_client().admin_update_user(admin.id, {"password": new_password})

        record_admin_operation(
            operator_id = operator.id,
            target_id = admin.id,
            operation_type = "reset_admin_password",
            details = {"display_name": admin.display_name}
        )

        return {"id": admin.id, "message": messages.SUCCESS['PASSWORD_RESET']}



    def toggle_status(self, operator, admin_id: str) -> dict:
        """
        Flip is_active
        """

        if operator.id == admin_id:
            raise ServiceException(
                error_code = "CANNOT_DISABLE_SELF",
                message = messages.ERROR['CANNOT_DISABLE_SELF']
            )

        admin = self._get_admin(admin_id)

        try:
            admin.is_active = not admin.is_active
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ADMIN_UPDATE_FAILED",
                message = messages.ERROR['ADMIN_UPDATE_FAILED'],
                details = str(errors)
            )

        new_status = "active" if admin.is_active else "inactive"
        logger.info("🔁 Admin %s is now %s", admin.id, new_status)

        record_admin_operation(
            operator_id = operator.id,
            target_id = admin.id,
            operation_type = "toggle_admin_status",
            details = {"new_status": new_status, "display_name": admin.display_name}
        )

        return {
            "admin": serialize_admin(admin),
            "message": messages.SUCCESS['ADMIN_STATUS_CHANGED'].format(new_status)
        }
