"""
Upgrade Request

Handles:
    - Swagger body model for Order Upgrade API
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class UpgradeRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Order Upgrade
        """

        model = namespace.model("UpgradeRequest", {
            "service_duration_id": fields.Integer(
                required = True,
                description = "Target service duration (from the upgrade options)"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
