"""
Service Catalogue Requests

Handles:
    - Swagger body models for services, durations and bindings
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class CatalogueRequest:

    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}


    @staticmethod
    def localized(namespace):
        return namespace.model("LocalizedText", {
            "en": fields.String,
            "zh": fields.String,
            "th": fields.String
        })





class ServiceRequest(CatalogueRequest):

    @staticmethod
    def apply(namespace):
        localized = CatalogueRequest.localized(namespace)

        model = namespace.model("ServiceRequest", {
            "code": fields.String(description = "1-50 letters, digits, _ or - (required on create)"),
            "category_id": fields.Integer(description = "Category id (required on create)"),
            "title": fields.Nested(localized, description = "Required on create"),
            "description": fields.Nested(localized),
            "badge": fields.String(description = "TOP_PICK | HOT | NEW | null"),
            "is_active": fields.Boolean,
            "is_visible_to_thai": fields.Boolean,
            "is_visible_to_english": fields.Boolean,
            "min_user_level": fields.Integer(description = "0-10"),
            "sort_order": fields.Integer(description = "0-9999, default 999")
        })

        return namespace.expect(model)





class DurationRequest(CatalogueRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("DurationRequest", {
            "duration_minutes": fields.Integer(description = "30, 60, 90, 120, 150, 180, 240, 300, 360 or 480"),
            "default_price": fields.Integer(description = "100-50000 in steps of 100"),
            "min_price": fields.Integer(description = "<= default_price"),
            "max_price": fields.Integer(description = ">= default_price"),
            "is_active": fields.Boolean
        })

        return namespace.expect(model)





class BindRequest(CatalogueRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("BindRequest", {
            "girl_ids": fields.List(fields.String, required = True, description = "Therapist ids")
        })

        return namespace.expect(model)





class UnbindRequest(CatalogueRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("UnbindRequest", {
            "girl_ids": fields.List(fields.String, required = True),
            "notes": fields.String(required = True, description = "1-500 characters"),
            "disable_durations": fields.Boolean(description = "Also switch off the therapists' durations")
        })

        return namespace.expect(model)





class RestoreRequest(CatalogueRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("RestoreRequest", {
            "girl_ids": fields.List(fields.String, required = True),
            "notes": fields.String(description = "Up to 500 characters")
        })

        return namespace.expect(model)
