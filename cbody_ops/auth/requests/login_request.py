"""
Login Request

Handles:
    - Swagger body model for Admin Login API
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class LoginRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Admin Login
        """

        model = namespace.model("LoginRequest", {
            "email": fields.String(
                required = True,
                description = "Admin email"
            ),
            "password": fields.String(
                required = True,
                description = "Admin password"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True) or {}
