"""
Create Admin Service

Handles:
    - Create auth user (email confirmed)
    - Insert admin profile
    - Remove the auth user again if the profile insert fails
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
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Audit
from ...util.audit import record_admin_operation

# Serializers
from ...auth.services.login_service import serialize_admin

logger = logging.getLogger(__name__)





class CreateAdminService:

    def create_admin(self, operator, args: dict) -> dict:
        """
        Create a new admin account

        Args:
            operator (AdminProfile): superadmin performing the action
            args (dict): email, password, display_name, role

        Returns:
            dict
        """

        auth_client = factory.get_auth_client()
        display_name = args["display_name"].strip()

        user = auth_client.admin_create_user(
            email = args["email"].strip(),
            password = args["password"],
            user_metadata = {"display_name": display_name}
        )
        user_id = user.get("id")

        try:
            profile = AdminProfile(
                id = user_id,
                display_name = display_name,
                role = args["role"],
                is_active = True
            )
            db.session.add(profile)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()
            logger.error("❌ Admin profile insert failed for %s, removing auth user: %s", user_id, errors)

            try:
                auth_client.admin_delete_user(user_id)
            except Exception as cleanup_error:
                logger.error("❌ Could not remove orphan auth user %s: %s", user_id, cleanup_error)

            raise ServiceException(
                error_code = "ADMIN_CREATE_FAILED",
                message = messages.ERROR['ADMIN_CREATE_FAILED'],
                details = str(errors)
            )

        record_admin_operation(
            operator_id = operator.id,
            target_id = profile.id,
            operation_type = "create_admin",
            details = {"email": args["email"].strip(), "role": profile.role, "display_name": display_name}
        )

        return {
            "admin": serialize_admin(profile),
            "message": messages.SUCCESS['ADMIN_CREATED']
        }
