"""
Partner Controller

Handles:
    - Key check, rate limits, data fetch and request logging for /v1/girls
"""

# Python Packages
import logging
import time
from datetime import datetime, timezone

# Constants
from ..base import constants

# Services
from .services.api_key_service import ApiKeyService
from .services.partner_girl_service import PartnerGirlService
from .services.rate_limiter import rate_limiter

# Exceptions
from ..util.exceptions import AppException, RateLimitException

# App Messages
from ..util import messages

# Helpers
from ..util.helpers import utc_now

logger = logging.getLogger(__name__)


MINUTE = 60
HOUR = 60 * 60





def rate_limit_headers(result) -> dict:
    headers = {
        "X-RateLimit-Limit": str(result.limit),
        "X-RateLimit-Remaining": str(result.remaining),
        "X-RateLimit-Reset": datetime.fromtimestamp(result.reset_at, tz = timezone.utc).isoformat()
    }

    if not result.allowed:
        headers["Retry-After"] = str(result.retry_after)

    return headers





class PartnerController:

    def _check_limits(self, key, ip_address: str):
        """
        Per key (minute, then hour) and per IP windows

        Returns:
            RateLimitResult: the per-minute result, for response headers
        """

        per_minute = key.rate_limit_per_minute or constants.PARTNER_DEFAULT_PER_MINUTE
        per_hour = key.rate_limit_per_hour or constants.PARTNER_DEFAULT_PER_HOUR

        minute = rate_limiter.hit(f"{key.id}:minute", per_minute, MINUTE)
        if not minute.allowed:
            raise RateLimitException(messages.ERROR['RATE_LIMIT_EXCEEDED'], rate_limit_headers(minute))

        hour = rate_limiter.hit(f"{key.id}:hour", per_hour, HOUR)
        if not hour.allowed:
            raise RateLimitException(messages.ERROR['RATE_LIMIT_EXCEEDED'], rate_limit_headers(hour))

        ip = rate_limiter.hit(f"ip:{ip_address}", constants.PARTNER_IP_PER_HOUR, HOUR)
        if not ip.allowed:
            raise RateLimitException(
                messages.ERROR['IP_RATE_LIMIT_EXCEEDED'],
                rate_limit_headers(ip),
                error_code = "IP_RATE_LIMIT_EXCEEDED"
            )

        return minute



    def list_girls(self, api_key: str, endpoint: str, method: str, ip_address: str, user_agent: str):
        """
        Returns:
            tuple: (girls, meta, headers)
        """

        started = time.monotonic()
        key = ApiKeyService().authenticate(api_key)
        status_code = 500

        try:
            limit = self._check_limits(key, ip_address)
            girls = PartnerGirlService().list_girls()
            status_code = 200

        except AppException as error:
            status_code = error.status_code
            raise

        finally:
            ApiKeyService().log_request(
                api_key_id = key.id,
                endpoint = endpoint,
                method = method,
                status_code = status_code,
                ip_address = ip_address,
                user_agent = user_agent,
                response_time_ms = int((time.monotonic() - started) * 1000)
            )

        logger.info("🤝 %s served %s therapists to key %s", endpoint, len(girls), key.key_prefix or key.id)

        meta = {"total": len(girls), "timestamp": utc_now().isoformat()}

        return girls, meta, rate_limit_headers(limit)
