"""
Admin Controller

Handles:
    - Orchestration between handler and admin services
"""

# Services
from .services.list_admin_service import ListAdminService
from .services.create_admin_service import CreateAdminService
from .services.manage_admin_service import ManageAdminService





class AdminController:

    def list_admins(self, search: str = None, role: str = None) -> dict:
        return ListAdminService().list_admins(search, role)


    def list_operation_logs(self) -> dict:
        return ListAdminService().list_operation_logs()


    def create_admin(self, operator, args: dict) -> dict:
        return CreateAdminService().create_admin(operator, args)


    def update_display_name(self, operator, admin_id: str, display_name: str) -> dict:
        return ManageAdminService().update_display_name(operator, admin_id, display_name)


    def reset_password(self, operator, admin_id: str, new_password: str) -> dict:
        return ManageAdminService().reset_password(operator, admin_id, new_password)


    def toggle_status(self, operator, admin_id: str) -> dict:
        return ManageAdminService().toggle_status(operator, admin_id)
