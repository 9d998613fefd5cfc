"""
File: City Panel Routes

Partner city panels (aloha, cbody). Each panel is open to one support
account, matched by display name.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.panel_request import ToggleBusyRequest

# Validations
from .validations.panel_validation import BusyMinutesValidation

# Controller
from .controller import PanelController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
panel_namespace = Namespace('panels', description = 'City Panel APIs')

PANEL_ROLES = (constants.ROLE_SUPPORT,)





@panel_namespace.route('/<string:panel>/girls')
class PanelGirls(Resource):

    @panel_namespace.doc(params = {"page": "Page number", "limit": "Page size (max 100)"})
    @handle_errors
    def get(self, panel):
        """
        Online therapists of the panel city
        """

        operator = require_admin(PANEL_ROLES)
        return success(PanelController().list_girls(operator, panel, request.args))



@panel_namespace.route('/<string:panel>/girls/<string:girl_id>/toggle-busy')
class PanelToggleBusy(Resource):

    @ToggleBusyRequest.apply(panel_namespace)
    @handle_errors
    def post(self, panel, girl_id):
        """
        Switch between available and busy
        """

        operator = require_admin(PANEL_ROLES)
        minutes = BusyMinutesValidation().validate(ToggleBusyRequest.get_data().get("minutes"))

        return success(PanelController().toggle_busy(operator, panel, girl_id, minutes))
