"""
File: Media Moderation Routes

Handles:
    - List, Stats, Signed URL
    - Approve / Reject (single and batch), Restore
    - Delete, Reorder, Level update

All routes need superadmin or admin.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.media_request import (
    ApproveMediaRequest,
    RejectMediaRequest,
    BatchMediaRequest,
    ReorderMediaRequest,
    SignedUrlRequest,
    MediaLevelRequest
)

# Validations
from .validations.media_validation import (
    UserLevelValidation,
    MediaRejectValidation,
    BatchIdsValidation,
    ReorderValidation,
    SignedUrlValidation
)

# Controller
from .controller import MediaController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
media_namespace = Namespace('media', description = 'Therapist Media Moderation APIs')





@media_namespace.route('/')
class MediaList(Resource):

    @media_namespace.doc(params = {
        "status": "pending | approved | rejected",
        "girl_id": "Therapist id",
        "kind": "image | video | live_photo",
        "min_user_level": "Exact level",
        "start_date": "Created from (ISO)",
        "end_date": "Created to (ISO)",
        "search": "Therapist number or name",
        "sort_by": "created_at | reviewed_at | sort_order",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        List media
        """

        require_admin(constants.MODERATION_ROLES)
        return success(MediaController().list_media(request.args))



@media_namespace.route('/stats')
class MediaStats(Resource):

    @handle_errors
    def get(self):
        """
        Moderation counters
        """

        require_admin(constants.MODERATION_ROLES)
        return success(MediaController().get_stats())



@media_namespace.route('/signed-url')
class MediaSignedUrl(Resource):

    @SignedUrlRequest.apply(media_namespace)
    @handle_errors
    def post(self):
        """
        Signed URL for a private object
        """

        require_admin(constants.MODERATION_ROLES)
        args = SignedUrlValidation().validate(SignedUrlRequest.get_data())

        return success(MediaController().create_signed_url(args))



@media_namespace.route('/batch-approve')
class MediaBatchApprove(Resource):

    @BatchMediaRequest.apply(media_namespace)
    @handle_errors
    def post(self):
        """
        Approve several items
        """

        operator = require_admin(constants.MODERATION_ROLES)
        args = BatchMediaRequest.get_data()

        ids = BatchIdsValidation().validate(args.get("ids"))
        level = UserLevelValidation().validate(args.get("min_user_level"))

        return success(MediaController().batch_approve(operator, ids, level))



@media_namespace.route('/batch-reject')
class MediaBatchReject(Resource):

    @BatchMediaRequest.apply(media_namespace)
    @handle_errors
    def post(self):
        """
        Reject several items
        """

        operator = require_admin(constants.MODERATION_ROLES)
        args = BatchMediaRequest.get_data()

        ids = BatchIdsValidation().validate(args.get("ids"))
        reason = MediaRejectValidation().validate(args.get("reason"))

        return success(MediaController().batch_reject(operator, ids, reason))



@media_namespace.route('/reorder')
class MediaReorder(Resource):

    @ReorderMediaRequest.apply(media_namespace)
    @handle_errors
    def post(self):
        """
        Set display order of a therapist's media
        """

        require_admin(constants.MODERATION_ROLES)
        args = ReorderMediaRequest.get_data()

        ReorderValidation().validate(args)

        return success(MediaController().reorder(args))



@media_namespace.route('/<string:media_id>')
class MediaItem(Resource):

    @handle_errors
    def delete(self, media_id):
        """
        Delete media and its files
        """

        require_admin(constants.MODERATION_ROLES)
        return success(MediaController().delete(media_id))



@media_namespace.route('/<string:media_id>/approve')
class MediaApprove(Resource):

    @ApproveMediaRequest.apply(media_namespace)
    @handle_errors
    def post(self, media_id):
        """
        Approve media
        """

        operator = require_admin(constants.MODERATION_ROLES)
        level = UserLevelValidation().validate(ApproveMediaRequest.get_data().get("min_user_level"))

        return success(MediaController().approve(operator, media_id, level))



@media_namespace.route('/<string:media_id>/reject')
class MediaReject(Resource):

    @RejectMediaRequest.apply(media_namespace)
    @handle_errors
    def post(self, media_id):
        """
        Reject media
        """

        operator = require_admin(constants.MODERATION_ROLES)
        reason = MediaRejectValidation().validate(RejectMediaRequest.get_data().get("reason"))

        return success(MediaController().reject(operator, media_id, reason))



@media_namespace.route('/<string:media_id>/level')
class MediaLevel(Resource):

    @MediaLevelRequest.apply(media_namespace)
    @handle_errors
    def put(self, media_id):
        """
        Change the customer level needed to see approved media
        """

        require_admin(constants.MODERATION_ROLES)
        level = UserLevelValidation().validate(MediaLevelRequest.get_data().get("min_user_level"), required = True)

        return success(MediaController().update_level(media_id, level))



@media_namespace.route('/<string:media_id>/restore')
class MediaRestore(Resource):

    @handle_errors
    def post(self, media_id):
        """
        Move rejected media back to pending
        """

        require_admin(constants.MODERATION_ROLES)
        return success(MediaController().restore(media_id))
