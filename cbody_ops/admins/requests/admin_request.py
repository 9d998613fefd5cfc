"""
Admin Requests

Handles:
    - Swagger body models for admin management APIs
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class CreateAdminRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Create Admin
        """

        model = namespace.model("CreateAdminRequest", {
            "email": fields.String(required = True, description = "Login email"),
            "password": fields.String(required = True, description = "Initial password, at least 8 characters"),
            "display_name": fields.String(required = True, description = "Name shown in the back office"),
            "role": fields.String(
                required = True,
                enum = ["superadmin", "admin", "finance", "support"],
                description = "Admin role"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class UpdateAdminRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Update Admin Display Name
        """

        model = namespace.model("UpdateAdminRequest", {
            "display_name": fields.String(required = True, description = "New display name")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class ResetPasswordRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Password Reset
        """

        model = namespace.model("ResetAdminPasswordRequest", {
            "new_password": fields.String(required = True, description = "New password, at least 8 characters")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
