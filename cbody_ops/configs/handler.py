"""
File: Runtime Config Routes

All routes need superadmin or admin.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.fare_config_request import FareConfigRequest

# Validations
from .validations.fare_config_validation import FareConfigValidation

# Controller
from .controller import ConfigController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
config_namespace = Namespace('configs', description = 'Runtime Config APIs')





@config_namespace.route('/')
class ConfigList(Resource):

    @config_namespace.doc(params = {"namespace": "Filter by namespace"})
    @handle_errors
    def get(self):
        """
        Active configs
        """

        require_admin(constants.MODERATION_ROLES)
        return success(ConfigController().list_configs(request.args))



@config_namespace.route('/fare')
class FareConfig(Resource):

    @handle_errors
    def get(self):
        """
        Fare parameters
        """

        require_admin(constants.MODERATION_ROLES)
        return success(ConfigController().get_fare_config())


    @FareConfigRequest.apply(config_namespace)
    @handle_errors
    def put(self):
        """
        Replace fare parameters
        """

        operator = require_admin(constants.MODERATION_ROLES)
        params = FareConfigValidation().validate(FareConfigRequest.get_data())

        return success(ConfigController().update_fare_config(operator, params))
