"""
Report Requests

Handles:
    - Swagger body model for resolving a report
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class ResolveReportRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ResolveReportRequest", {
            "admin_notes": fields.String(description = "Optional, up to 1000 characters")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
