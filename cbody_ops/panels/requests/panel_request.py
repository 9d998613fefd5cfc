"""
City Panel Requests
"""

from flask_restx import fields
from flask import request





class ToggleBusyRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ToggleBusyRequest", {
            "minutes": fields.Integer(description = "Busy length, 1-1440; required when switching to busy")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
