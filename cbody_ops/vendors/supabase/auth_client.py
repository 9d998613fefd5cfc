"""
Auth Provider Client (Supabase GoTrue REST)

Handles:
    - Password sign-in for admins
    - Resolving an access token to its user
    - Admin user management (create / update / delete)
"""

# Python Packages
import logging

import httpx

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ExternalServiceException, UnauthorizedException

logger = logging.getLogger(__name__)





class SupabaseAuthClient:

    def __init__(self):
        self.base_url = f"{constants.SUPABASE_URL.rstrip('/')}/auth/v1"
        self.anon_key = constants.SUPABASE_ANON_KEY or constants.SUPABASE_SERVICE_ROLE_KEY
        self.service_key = constants.SUPABASE_SERVICE_ROLE_KEY
        self.timeout = constants.HTTP_TIMEOUT_SECONDS


    def _service_headers(self) -> dict:
        return {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
            "Content-Type": "application/json"
        }


    def sign_in_with_password(self, email: str, password: str) -> dict:
        """
        Password grant

        Returns:
            dict: {"access_token", "refresh_token", "expires_in", "user": {...}}

        Raises:
            UnauthorizedException: wrong credentials
        """

        try:
            response = httpx.post(
                f"{self.base_url}/token",
                params = {"grant_type": "password"},
                headers = {"apikey": self.anon_key, "Content-Type": "application/json"},
                json = {"email": email, "password": password},
                timeout = self.timeout
            )

        except httpx.HTTPError as e:
            raise ExternalServiceException(
                error_code = "AUTH_PROVIDER_UNAVAILABLE",
                message = "Authentication service is unavailable",
                details = str(e)
            )

        if response.status_code in (400, 401, 422):
            raise UnauthorizedException("Invalid email or password")

        if response.status_code >= 300:
            raise ExternalServiceException(
                error_code = "AUTH_PROVIDER_ERROR",
                message = "Authentication service error",
                details = response.text
            )

        return response.json()


    def get_user(self, access_token: str) -> dict:
        """
        Resolve an access token to its user

        Raises:
            UnauthorizedException: token rejected
        """

        try:
            response = httpx.get(
                f"{self.base_url}/user",
                headers = {"apikey": self.anon_key, "Authorization": f"Bearer {access_token}"},
                timeout = self.timeout
            )

        except httpx.HTTPError as e:
            logger.error("❌ Token lookup failed: %s", e)
            raise UnauthorizedException("Unable to verify session")

        if response.status_code != 200:
            raise UnauthorizedException("Session expired or invalid")

        return response.json()


    def admin_create_user(self, email: str, password: str, user_metadata: dict = None) -> dict:
        """
        Create an already confirmed user
        """

        return self._admin_request(
            "POST",
            "/admin/users",
            json = {
                "email": email,
                "password": password,
                "email_confirm": True,
                "user_metadata": user_metadata or {}
            }
        )


    def admin_update_user(self, user_id: str, attributes: dict) -> dict:
        """
        Update any user attribute (password, ban_duration, metadata...)
        """

        return self._admin_request("PUT", f"/admin/users/{user_id}", json = attributes)


    def admin_delete_user(self, user_id: str):
        self._admin_request("DELETE", f"/admin/users/{user_id}")


    def _admin_request(self, method: str, path: str, json: dict = None) -> dict:
        try:
            response = httpx.request(
                method,
                f"{self.base_url}{path}",
                headers = self._service_headers(),
                json = json,
                timeout = self.timeout
            )

        except httpx.HTTPError as e:
            raise ExternalServiceException(
                error_code = "AUTH_PROVIDER_UNAVAILABLE",
                message = "Authentication service is unavailable",
                details = str(e)
            )

        if response.status_code >= 300:
            try:
                body = response.json()
                message = body.get("msg") or body.get("message") or body.get("error_description") or response.text
            except ValueError:
                message = response.text

            raise ExternalServiceException(
                error_code = "AUTH_ADMIN_REQUEST_FAILED",
                message = message or "Authentication service error",
                details = f"{method} {path} -> {response.status_code}"
            )

        if not response.content:
            return {}

        return response.json()
