"""
File: Review Moderation Routes

All routes need superadmin, admin or support.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.review_request import RejectReviewRequest, ReviewLevelRequest

# Validations
from .validations.review_validation import ReviewRejectValidation, ReviewLevelValidation

# Controller
from .controller import ReviewController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
review_namespace = Namespace('reviews', description = 'Order Review Moderation APIs')





@review_namespace.route('/')
class ReviewList(Resource):

    @review_namespace.doc(params = {
        "status": "pending | approved | rejected",
        "rating": "1-5",
        "search": "Order number, therapist or customer",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        List reviews
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(ReviewController().list_reviews(request.args))



@review_namespace.route('/stats')
class ReviewStats(Resource):

    @handle_errors
    def get(self):
        """
        Review counters
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(ReviewController().get_stats())



@review_namespace.route('/<string:review_id>/approve')
class ReviewApprove(Resource):

    @handle_errors
    def post(self, review_id):
        """
        Approve a pending review
        """

        operator = require_admin(constants.SUPPORT_ROLES)
        return success(ReviewController().approve(operator, review_id))



@review_namespace.route('/<string:review_id>/reject')
class ReviewReject(Resource):

    @RejectReviewRequest.apply(review_namespace)
    @handle_errors
    def post(self, review_id):
        """
        Reject a pending review
        """

        operator = require_admin(constants.SUPPORT_ROLES)
        reason = ReviewRejectValidation().validate(RejectReviewRequest.get_data().get("reason"))

        return success(ReviewController().reject(operator, review_id, reason))



@review_namespace.route('/<string:review_id>/level')
class ReviewLevel(Resource):

    @ReviewLevelRequest.apply(review_namespace)
    @handle_errors
    def put(self, review_id):
        """
        Minimum customer level that can see the review
        """

        require_admin(constants.SUPPORT_ROLES)
        level = ReviewLevelValidation().validate(ReviewLevelRequest.get_data().get("min_user_level"))

        return success(ReviewController().update_level(review_id, level))
