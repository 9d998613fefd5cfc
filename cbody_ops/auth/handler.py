"""
File: Auth Routes

Handles:
    - Admin Login
    - Current Admin Profile
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.login_request import LoginRequest

# Validations
from .validations.login_validation import LoginValidation

# Controller
from .controller import AuthController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
auth_namespace = Namespace('auth', description = 'Admin Authentication APIs')





@auth_namespace.route('/login')
class Login(Resource):

    @LoginRequest.apply(auth_namespace)
    @handle_errors
    def post(self):
        """
        Sign in with email and password
        """

        # Args
        args = LoginRequest.get_data()

        # Validations
        LoginValidation().validate(args)

        # Controller
        return success(AuthController().login(args))



@auth_namespace.route('/me')
class Me(Resource):

    @handle_errors
    def get(self):
        """
        Current admin profile
        """

        admin = require_admin()
        return success(AuthController().me(admin))
