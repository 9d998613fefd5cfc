"""
File: Admin Routes

Handles:
    - List / Create Admins
    - Rename, Reset Password, Toggle Status
    - Operation Logs

All routes are superadmin only.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.admin_request import CreateAdminRequest, UpdateAdminRequest, ResetPasswordRequest

# Validations
from .validations.admin_validation import (
    CreateAdminValidation,
    DisplayNameValidation,
    AdminPasswordValidation
)

# Controller
from .controller import AdminController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
admin_namespace = Namespace('admins', description = 'Admin Account Management APIs')





@admin_namespace.route('/')
class Admins(Resource):

    @admin_namespace.doc(params = {"search": "Name or id fragment", "role": "Exact role"})
    @handle_errors
    def get(self):
        """
        List admins, newest first
        """

        require_admin(constants.SUPERADMIN_ONLY)

        return success(AdminController().list_admins(
            search = request.args.get("search"),
            role = request.args.get("role")
        ))


    @CreateAdminRequest.apply(admin_namespace)
    @handle_errors
    def post(self):
        """
        Create admin account
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)

        # Args
        args = CreateAdminRequest.get_data()

        # Validations
        CreateAdminValidation().validate(args)

        return success(AdminController().create_admin(operator, args), 201)



@admin_namespace.route('/operation-logs')
class AdminOperationLogs(Resource):

    @handle_errors
    def get(self):
        """
        Latest admin operation logs
        """

        require_admin(constants.SUPERADMIN_ONLY)
        return success(AdminController().list_operation_logs())



@admin_namespace.route('/<string:admin_id>')
class AdminItem(Resource):

    @UpdateAdminRequest.apply(admin_namespace)
    @handle_errors
    def patch(self, admin_id):
        """
        Update admin display name
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        args = UpdateAdminRequest.get_data()

        DisplayNameValidation().validate(args.get("display_name"))

        return success(AdminController().update_display_name(operator, admin_id, args["display_name"]))



@admin_namespace.route('/<string:admin_id>/reset-password')
class AdminResetPassword(Resource):

    @ResetPasswordRequest.apply(admin_namespace)
    @handle_errors
    def post(self, admin_id):
        """
        Reset admin password
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        args = ResetPasswordRequest.get_data()

        AdminPasswordValidation().validate(args.get("new_password"))

        return success(AdminController().reset_password(operator, admin_id, args["new_password"]))



@admin_namespace.route('/<string:admin_id>/toggle-status')
class AdminToggleStatus(Resource):

    @handle_errors
    def post(self, admin_id):
        """
        Enable or disable an admin
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        return success(AdminController().toggle_status(operator, admin_id))
