"""
Media Requests

Handles:
    - Swagger body models for media moderation APIs
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class MediaRequest:
    """ Every media body is plain JSON... """

    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}





class ApproveMediaRequest(MediaRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("ApproveMediaRequest", {
            "min_user_level": fields.Integer(description = "0-10, default 0")
        })

        return namespace.expect(model)





class RejectMediaRequest(MediaRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("RejectMediaRequest", {
            "reason": fields.String(required = True, description = "1-500 characters")
        })

        return namespace.expect(model)





class BatchMediaRequest(MediaRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("BatchMediaRequest", {
            "ids": fields.List(fields.String, required = True, description = "Media ids"),
            "min_user_level": fields.Integer(description = "Batch approve only"),
            "reason": fields.String(description = "Batch reject only")
        })

        return namespace.expect(model)





class ReorderMediaRequest(MediaRequest):

    @staticmethod
    def apply(namespace):
        item = namespace.model("ReorderMediaItem", {
            "id": fields.String(required = True),
            "sort_order": fields.Integer(required = True, description = ">= 0")
        })

        model = namespace.model("ReorderMediaRequest", {
            "girl_id": fields.String(required = True),
            "items": fields.List(fields.Nested(item), required = True)
        })

        return namespace.expect(model)





class SignedUrlRequest(MediaRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("SignedUrlRequest", {
            "key": fields.String(required = True, description = "Object key"),
            "bucket": fields.String(enum = ["girls-media", "tmp-uploads"]),
            "expires_in": fields.Integer(description = "60-86400 seconds, default 3600")
        })

        return namespace.expect(model)





class MediaLevelRequest(MediaRequest):

    @staticmethod
    def apply(namespace):
        model = namespace.model("MediaLevelRequest", {
            "min_user_level": fields.Integer(required = True, description = "0-10")
        })

        return namespace.expect(model)
