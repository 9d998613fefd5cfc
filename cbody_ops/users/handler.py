"""
File: Customer Routes

Handles:
    - List / Detail (any admin)
    - Update Profile, Toggle Ban, Reset Password (superadmin)
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.user_request import UpdateUserRequest, ToggleBanRequest, ResetUserPasswordRequest

# Validations
from .validations.user_validation import UpdateUserValidation, BanReasonValidation, UserPasswordValidation

# Controller
from .controller import UserController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
user_namespace = Namespace('users', description = 'Customer Management APIs')





@user_namespace.route('/')
class Users(Resource):

    @user_namespace.doc(params = {
        "search": "Display name or username",
        "country_code": "Country code",
        "language_code": "en | zh | th",
        "is_banned": "true | false",
        "level": "Exact level",
        "date_from": "Created from (ISO)",
        "date_to": "Created to (ISO)",
        "sort_by": "created_at | level | credit_score",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        List customers
        """

        require_admin()
        return success(UserController().list_users(request.args))



@user_namespace.route('/<string:user_id>')
class UserItem(Resource):

    @handle_errors
    def get(self, user_id):
        """
        Customer detail
        """

        require_admin()
        return success(UserController().get_user(user_id))


    @UpdateUserRequest.apply(user_namespace)
    @handle_errors
    def patch(self, user_id):
        """
        Update customer profile
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        updates = UpdateUserValidation().validate(UpdateUserRequest.get_data())

        return success(UserController().update_profile(operator, user_id, updates))



@user_namespace.route('/<string:user_id>/toggle-ban')
class UserToggleBan(Resource):

    @ToggleBanRequest.apply(user_namespace)
    @handle_errors
    def post(self, user_id):
        """
        Ban or unban a customer
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        reason = ToggleBanRequest.get_data().get("reason")

        BanReasonValidation().validate(reason)

        return success(UserController().toggle_ban(operator, user_id, reason))



@user_namespace.route('/<string:user_id>/reset-password')
class UserResetPassword(Resource):

    @ResetUserPasswordRequest.apply(user_namespace)
    @handle_errors
    def post(self, user_id):
        """
        Reset customer password
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        new_password = ResetUserPasswordRequest.get_data().get("new_password")

        UserPasswordValidation().validate(new_password)

        return success(UserController().reset_password(operator, user_id, new_password))
