"""
Admin Guard

Resolves the Bearer token of the current request to an active admin profile
and checks its role against an allow-list.
"""

# Python Packages
import logging

from flask import request

# Models
from ..models.admin_profile import AdminProfile

# Vendors
from ..vendors import factory

# App Messages
from . import messages

# Exceptions
from .exceptions import UnauthorizedException, ForbiddenException

logger = logging.getLogger(__name__)





def get_bearer_token():
    """ Token from the Authorization header, or None... """

    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")

    if scheme.lower() != "bearer" or not token.strip():
        return None

    return token.strip()



def require_admin(allowed_roles = None) -> AdminProfile:
    """
    Guard for every back office endpoint

    Args:
        allowed_roles (tuple): roles allowed through; None allows any admin

    Returns:
        AdminProfile

    Raises:
        UnauthorizedException: no token, or token rejected
        ForbiddenException: not an admin, disabled, or role not allowed
    """

    token = get_bearer_token()
    if not token:
        raise UnauthorizedException(messages.ERROR["AUTH_TOKEN_MISSING"])

    user = factory.get_auth_client().get_user(token)
    user_id = user.get("id")

    if not user_id:
        raise UnauthorizedException(messages.ERROR["AUTH_TOKEN_INVALID"])

    profile = AdminProfile.query.filter_by(id = user_id).first()

    if not profile:
        raise ForbiddenException("NOT_ADMIN", messages.ERROR["NOT_ADMIN"])

    if not profile.is_active:
        raise ForbiddenException("ADMIN_DISABLED", messages.ERROR["ADMIN_DISABLED"])

    if allowed_roles and profile.role not in allowed_roles:
        logger.info("🚫 %s (%s) denied, needs one of %s", profile.id, profile.role, allowed_roles)
        raise ForbiddenException("INSUFFICIENT_ROLE", messages.ERROR["INSUFFICIENT_ROLE"])

    return profile
