"""
API Response Helpers

Handles:
    - Success envelope {"ok": true, "data": ...}
    - Converting raised exceptions into {"ok": false, "error": ...}
"""

# Python Packages
import logging
from functools import wraps

# Database
from ..config.database import db

# Exceptions
from .exceptions import AppException, RateLimitException, InternalServerException

logger = logging.getLogger(__name__)





def success(data = None, status_code: int = 200, headers: dict = None, meta: dict = None):
    """ Success envelope... """

    body = {"ok": True, "data": data}
    if meta is not None:
        body["meta"] = meta

    if headers:
        return body, status_code, headers

    return body, status_code



def handle_errors(func):
    """
    Wrap a Resource method so every failure leaves as an error envelope
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)

        except RateLimitException as error:
            return error.to_dict(), error.status_code, error.headers

        except AppException as error:
            logger.info("⚠️ %s: %s", error.error_code, error.message)
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("❌ Unhandled error in %s", func.__qualname__)
            db.session.rollback()
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code

    return wrapper
