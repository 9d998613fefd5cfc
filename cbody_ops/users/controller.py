"""
User Controller

Handles:
    - Orchestration between handler and customer services
"""

# Services
from .services.list_user_service import ListUserService
from .services.manage_user_service import ManageUserService





class UserController:

    def list_users(self, args) -> dict:
        return ListUserService().list_users(args)


    def get_user(self, user_id: str) -> dict:
        return ListUserService().get_user(user_id)


    def update_profile(self, operator, user_id: str, updates: dict) -> dict:
        return ManageUserService().update_profile(operator, user_id, updates)


    def toggle_ban(self, operator, user_id: str, reason: str = None) -> dict:
        return ManageUserService().toggle_ban(operator, user_id, reason)


    def reset_password(self, operator, user_id: str, new_password: str) -> dict:
        return ManageUserService().reset_password(operator, user_id, new_password)
