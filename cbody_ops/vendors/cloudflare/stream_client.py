"""
Video Host Client (Cloudflare Stream)
"""

# Python Packages
import logging

import httpx

# Constants
from ...base import constants

logger = logging.getLogger(__name__)





class CloudflareStreamClient:

    def __init__(self):
        self.account_id = constants.CF_ACCOUNT_ID
        self.token = constants.CF_STREAM_TOKEN
        self.timeout = constants.HTTP_TIMEOUT_SECONDS


    def delete_video(self, uid: str) -> bool:
        """
        Delete a hosted video. A video that is already gone counts as deleted.

        Returns:
            bool: False when the host refused or could not be reached
        """

        if not self.account_id or not self.token:
            logger.warning("⚠️ Video host credentials missing, skipped delete of %s", uid)
            return False

        url = f"{constants.CF_API_BASE_URL}/accounts/{self.account_id}/stream/{uid}"

        try:
            response = httpx.delete(
                url,
                headers = {"Authorization": f"Bearer {self.token}"},
                timeout = self.timeout
            )

        except httpx.HTTPError as e:
            logger.error("❌ Video delete failed for %s: %s", uid, e)
            return False

        if response.status_code in (200, 204, 404):
            return True

        logger.error("❌ Video delete for %s returned HTTP %s: %s", uid, response.status_code, response.text)
        return False
