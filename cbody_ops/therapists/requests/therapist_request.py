"""
Therapist Requests
"""

from flask_restx import fields
from flask import request





class CooldownRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Set Cooldown
        """

        model = namespace.model("CooldownRequest", {
            "hours": fields.Float(required = True, description = "Cooldown length in hours (max 72)")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class GirlProfileRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Create / Update Profile
        """

        localized = namespace.model("GirlProfileText", {
            "en": fields.String,
            "zh": fields.String,
            "th": fields.String
        })

        model = namespace.model("GirlProfileRequest", {
            "girl_number": fields.Integer(description = "Defaults to the next free number on create"),
            "username": fields.String(description = "3-50 letters, digits, _ or -"),
            "name": fields.String(description = "1-50 characters"),
            "profile": fields.Nested(localized),
            "tags": fields.List(fields.String),
            "avatar_url": fields.String,
            "birth_date": fields.String(description = "YYYY-MM-DD"),
            "height": fields.Integer(description = "100-250 cm"),
            "weight": fields.Integer(description = "30-200 kg"),
            "measurements": fields.String(description = "Up to 15 characters"),
            "gender": fields.Integer(description = "0 female, 1 male"),
            "languages": fields.List(fields.String),
            "badge": fields.String(description = "new | hot | top_rated | null"),
            "rating": fields.Float(description = "0-5"),
            "max_travel_distance": fields.Integer(description = "1-100 km"),
            "trust_score": fields.Integer(description = "0-100, default 80"),
            "is_verified": fields.Boolean,
            "is_blocked": fields.Boolean,
            "is_visible_to_thai": fields.Boolean,
            "sort_order": fields.Integer(description = "0-9999, default 999"),
            "city_id": fields.Integer,
            "category_ids": fields.List(fields.Integer, description = "At least one")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class LiveStatusRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Live Status Upsert
        """

        model = namespace.model("LiveStatusRequest", {
            "status": fields.String(description = "available | busy | offline"),
            "current_lat": fields.Float(description = "-90 to 90"),
            "current_lng": fields.Float(description = "-180 to 180"),
            "next_available_time": fields.String(description = "ISO datetime or null")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
