"""
File: Report Routes

All routes need superadmin, admin or support.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.report_request import ResolveReportRequest

# Validations
from .validations.report_validation import ResolveReportValidation

# Controller
from .controller import ReportController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
report_namespace = Namespace('reports', description = 'User Report APIs')





@report_namespace.route('/')
class ReportList(Resource):

    @report_namespace.doc(params = {
        "status": "pending | resolved",
        "reporter_role": "customer | girl",
        "search": "Report type or description",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        List reports
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(ReportController().list_reports(request.args))



@report_namespace.route('/stats')
class ReportStats(Resource):

    @handle_errors
    def get(self):
        """
        Report counters
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(ReportController().get_stats())



@report_namespace.route('/<string:report_id>')
class ReportItem(Resource):

    @handle_errors
    def get(self, report_id):
        """
        Report detail
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(ReportController().get_report(report_id))



@report_namespace.route('/<string:report_id>/resolve')
class ReportResolve(Resource):

    @ResolveReportRequest.apply(report_namespace)
    @handle_errors
    def post(self, report_id):
        """
        Resolve a pending report
        """

        operator = require_admin(constants.SUPPORT_ROLES)
        notes = ResolveReportValidation().validate(ResolveReportRequest.get_data().get("admin_notes"))

        return success(ReportController().resolve(operator, report_id, notes))
