"""
Auth Controller
"""

# Services
from .services.login_service import LoginService, serialize_admin





class AuthController:

    def login(self, args: dict) -> dict:
        return LoginService().login(args.get("email"), args.get("password"))


    def me(self, admin) -> dict:
        return serialize_admin(admin)
