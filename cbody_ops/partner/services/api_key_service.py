"""
API Key Service

Handles:
    - Key generation and hashing
    - Key lookup for partner requests
    - Request log rows

Only the SHA-256 hex digest of a key is stored.
"""

# Python Packages
import hashlib
import logging
import secrets
import string

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.api_key import ApiKey, ApiRequestLog

# Exceptions
from ...util.exceptions import UnauthorizedException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now

logger = logging.getLogger(__name__)


KEY_ALPHABET = string.ascii_letters + string.digits





def generate_api_key() -> str:
    """ New partner key: prefix plus random alphanumerics... """

    return constants.API_KEY_PREFIX + "".join(
        secrets.choice(KEY_ALPHABET) for _ in range(constants.API_KEY_LENGTH)
    )


def hash_api_key(api_key: str) -> str:
    return hashlib.sha256(api_key.encode("utf-8")).hexdigest()





class ApiKeyService:

    def authenticate(self, api_key: str) -> ApiKey:
        """
        Resolve a raw key to its active row and touch last_used_at

        Raises:
            UnauthorizedException: missing, unknown or inactive key
        """

        if not api_key:
            raise UnauthorizedException(messages.ERROR['API_KEY_MISSING'])

        key = ApiKey.query.filter_by(key_hash = hash_api_key(api_key)).first()

        if not key:
            raise UnauthorizedException(messages.ERROR['API_KEY_INVALID'])

        if not key.is_active:
            raise UnauthorizedException(messages.ERROR['API_KEY_INACTIVE'])

        try:
            key.last_used_at = utc_now()
            db.session.commit()

        except Exception as e:
            db.session.rollback()
            logger.error("❌ last_used_at not updated for key %s: %s", key.id, e)

        return key



    def log_request(self, api_key_id: str, endpoint: str, method: str, status_code: int,
                    ip_address: str = None, user_agent: str = None, response_time_ms: int = None) -> bool:
        """ A failed log write is reported and never fails the request... """

        try:
            db.session.add(ApiRequestLog(
                api_key_id = api_key_id,
                endpoint = endpoint,
                method = method,
                status_code = status_code,
                ip_address = ip_address,
                user_agent = user_agent,
                response_time_ms = response_time_ms
            ))
            db.session.commit()
            return True

        except Exception as e:
            db.session.rollback()
            logger.error("❌ API request log failed for %s: %s", endpoint, e)
            return False
