"""
Finance Requests

Handles:
    - Swagger body models for finance APIs
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class DepositRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("DepositRequest", {
            "deposit_amount": fields.Float(required = True, description = "New deposit, >= 0")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class PaymentUpdateRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Settlement Payment Update
        """

        model = namespace.model("PaymentUpdateRequest", {
            "customer_paid_to_platform": fields.Float(description = ">= 0"),
            "actual_paid_amount": fields.Float(description = "Amount actually received"),
            "platform_should_get": fields.Float(description = ">= 0, manual override"),
            "payment_content_type": fields.String(enum = ["deposit", "full_amount", "tip", "other"]),
            "payment_method": fields.String(
                enum = ["wechat", "alipay", "thb_bank_transfer", "credit_card", "cash", "other"]
            ),
            "payment_notes": fields.String(),
            "notes": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class RejectRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("FinanceRejectRequest", {
            "reason": fields.String(required = True, description = "Why it was rejected")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
