"""
Review Requests

Handles:
    - Swagger body models for review moderation
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class RejectReviewRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("RejectReviewRequest", {
            "reason": fields.String(required = True, description = "1-500 characters")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class ReviewLevelRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ReviewLevelRequest", {
            "min_user_level": fields.Integer(required = True, description = "0-10")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
