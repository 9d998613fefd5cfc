"""
User Requests

Handles:
    - Swagger body models for customer management APIs
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class UpdateUserRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Update Customer Profile
        """

        model = namespace.model("UpdateUserRequest", {
            "display_name": fields.String(description = "1-50 characters"),
            "username": fields.String(description = "1-50 characters"),
            "language_code": fields.String(enum = ["en", "zh", "th"]),
            "timezone": fields.String(description = "IANA name, max 50 characters"),
            "level": fields.Integer(description = "1-10"),
            "credit_score": fields.Integer(description = "0-1000"),
            "is_banned": fields.Boolean()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class ToggleBanRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ToggleBanRequest", {
            "reason": fields.String(description = "Optional, max 200 characters")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class ResetUserPasswordRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ResetUserPasswordRequest", {
            "new_password": fields.String(required = True, description = "8-50 characters")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
