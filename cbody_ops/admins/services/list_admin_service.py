"""
List Admin Service

Handles:
    - Admin profiles, newest first, with search and role filter
    - Latest admin operation logs with operator and target names
"""

# SQLAlchemy
from sqlalchemy import or_

# Constants
from ...base import constants

# Models
from ...models.admin_profile import AdminProfile
from ...models.audit import AdminOperationLog
from ...models.user_profile import UserProfile

# Helpers
from ...util.helpers import format_datetime

# Serializers
from ...auth.services.login_service import serialize_admin





class ListAdminService:

    def list_admins(self, search: str = None, role: str = None) -> dict:
        """
        Fetch admin list

        Args:
            search (str): display name or id fragment
            role (str): exact role

        Returns:
            dict
        """

        query = AdminProfile.query

        # 🔎 Apply Search Filter
        if search:
            query = query.filter(
                or_(
                    AdminProfile.display_name.ilike(f"%{search}%"),
                    AdminProfile.id.ilike(f"%{search}%")
                )
            )

        if role:
            query = query.filter(AdminProfile.role == role)

        admins = query.order_by(AdminProfile.created_at.desc()).all()

        return {
            "total": len(admins),
            "admins": [serialize_admin(admin) for admin in admins]
        }


    def list_operation_logs(self, limit: int = None) -> dict:
        """
        Latest operation logs

        Returns:
            dict
        """

        limit = limit or constants.ADMIN_LOG_LIMIT

        logs = (
            AdminOperationLog.query
            .order_by(AdminOperationLog.created_at.desc())
            .limit(limit)
            .all()
        )

        # Resolve names in two lookups instead of one per row
        admin_ids = {log.operator_id for log in logs} | {log.target_admin_id for log in logs if log.target_admin_id}
        admin_names = {
            admin.id: admin.display_name
            for admin in AdminProfile.query.filter(AdminProfile.id.in_(admin_ids)).all()
        } if admin_ids else {}

        user_ids = admin_ids - set(admin_names)
        user_names = {
            user.id: user.display_name or user.username
            for user in UserProfile.query.filter(UserProfile.id.in_(user_ids)).all()
        } if user_ids else {}

        return {
            "total": len(logs),
            "logs": [
                {
                    "id": log.id,
                    "operator_id": log.operator_id,
                    "operator_name": admin_names.get(log.operator_id),
                    "target_admin_id": log.target_admin_id,
                    "target_name": admin_names.get(log.target_admin_id) or user_names.get(log.target_admin_id),
                    "operation_type": log.operation_type,
                    "operation_details": log.operation_details,
                    "created_at": format_datetime(log.created_at)
                }
                for log in logs
            ]
        }
