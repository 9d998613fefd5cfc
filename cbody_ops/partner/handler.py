"""
File: Partner API Routes

Handles:
    - GET /v1/girls (API key, rate limited)
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Controller
from .controller import PartnerController

# Auth
from ..util.auth import get_bearer_token

# Responses
from ..util.responses import success, handle_errors

# Namespaces
partner_namespace = Namespace('partner', description = 'Partner APIs (API key)')





def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.headers.get("X-Real-IP") or request.remote_addr or "unknown"





@partner_namespace.route('/girls')
class PartnerGirls(Resource):

    @partner_namespace.doc(
        params = {"api_key": "API key, when not sent as Authorization: Bearer"},
        security = None
    )
    @handle_errors
    def get(self):
        """
        Verified therapists available to partners
        """

        girls, meta, headers = PartnerController().list_girls(
            api_key = get_bearer_token() or request.args.get("api_key"),
            endpoint = request.path,
            method = request.method,
            ip_address = client_ip(),
            user_agent = request.headers.get("User-Agent")
        )

        return success(girls, headers = headers, meta = meta)
