"""
Fare Config Request

Handles:
    - Swagger body model for the fare parameters
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class FareConfigRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("FareConfigRequest", {
            "baseFare": fields.Float(required = True, description = "Base fare, >= 0"),
            "freeDistanceKm": fields.Float(required = True, description = "Free distance in km, >= 0"),
            "tier1PerKm": fields.Float(required = True, description = "Per km, first tier"),
            "tier2PerKm": fields.Float(required = True, description = "Per km, second tier"),
            "tier3PerKm": fields.Float(required = True, description = "Per km, third tier"),
            "perMin": fields.Float(required = True, description = "Per minute, >= 0"),
            "tripMultiplier": fields.Float(required = True, description = "1-3 (1 one way, 2 round trip)"),
            "minFare": fields.Float(required = True, description = "Minimum fare, >= 0"),
            "roundUpTo": fields.Float(required = True, description = "Round up step, >= 1"),
            "rain_enabled": fields.Boolean(required = True),
            "rain_multiplier": fields.Float(required = True, description = "1-2"),
            "congestion_enabled": fields.Boolean(required = True),
            "congestion_multiplier": fields.Float(required = True, description = "1-2"),
            "eta_buffer_min_base": fields.Float(required = True, description = "Minutes, >= 0"),
            "eta_buffer_min_rain": fields.Float(required = True, description = "Minutes, >= 0"),
            "eta_buffer_min_congestion": fields.Float(required = True, description = "Minutes, >= 0")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
