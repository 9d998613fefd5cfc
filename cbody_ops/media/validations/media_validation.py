"""
Media Validations

Checks:
    - min_user_level range
    - reject reason length
    - batch ids
    - reorder items
    - signed URL parameters
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


REASON_MAX = 500





class UserLevelValidation:

    def validate(self, level, required: bool = False) -> int:

        if level is None and not required:
            return constants.MIN_USER_LEVEL

        if isinstance(level, bool) or not isinstance(level, int) \
                or not (constants.MIN_USER_LEVEL <= level <= constants.MAX_USER_LEVEL):
            raise ValidationException(
                message = messages.ERROR['INVALID_RANGE'].format(
                    "min_user_level", constants.MIN_USER_LEVEL, constants.MAX_USER_LEVEL
                )
            )

        return level





class MediaRejectValidation:

    def validate(self, reason) -> str:

        if not isinstance(reason, str) or not reason.strip():
            raise ValidationException(
                message = messages.ERROR['REASON_REQUIRED']
            )

        if len(reason.strip()) > REASON_MAX:
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format("reason", 1, REASON_MAX)
            )

        return reason.strip()





class BatchIdsValidation:

    def validate(self, ids) -> list:

        if not isinstance(ids, list) or not ids or not all(isinstance(item, str) and item for item in ids):
            raise ValidationException(
                message = messages.ERROR['IDS_REQUIRED']
            )

        # Keep first occurrence order
        return list(dict.fromkeys(ids))





class ReorderValidation:

    def validate(self, args: dict):

        if not args.get("girl_id"):
            raise ValidationException(
                message = messages.ERROR['GIRL_ID_REQUIRED']
            )

        items = args.get("items")
        if not isinstance(items, list) or not items:
            raise ValidationException(
                message = messages.ERROR['REORDER_ITEMS_REQUIRED']
            )

        for item in items:
            if not isinstance(item, dict) or not item.get("id"):
                raise ValidationException(message = messages.ERROR['REORDER_ITEMS_REQUIRED'])

            sort_order = item.get("sort_order")
            if isinstance(sort_order, bool) or not isinstance(sort_order, int) or sort_order < 0:
                raise ValidationException(
                    message = messages.ERROR['INVALID_SORT_ORDER']
                )

        return True





class SignedUrlValidation:

    def validate(self, args: dict) -> dict:

        key = args.get("key")
        if not isinstance(key, str) or not key.strip():
            raise ValidationException(
                message = messages.ERROR['STORAGE_KEY_REQUIRED']
            )

        bucket = args.get("bucket") or constants.BUCKET_GIRLS_MEDIA
        if bucket not in constants.SIGNED_URL_BUCKETS:
            raise ValidationException(
                message = messages.ERROR['INVALID_BUCKET']
            )

        expires_in = args.get("expires_in", constants.SIGNED_URL_DEFAULT_EXPIRES)
        if isinstance(expires_in, bool) or not isinstance(expires_in, int) \
                or not (constants.SIGNED_URL_MIN_EXPIRES <= expires_in <= constants.SIGNED_URL_MAX_EXPIRES):
            raise ValidationException(
                message = messages.ERROR['INVALID_RANGE'].format(
                    "expires_in", constants.SIGNED_URL_MIN_EXPIRES, constants.SIGNED_URL_MAX_EXPIRES
                )
            )

        return {"key": key.strip(), "bucket": bucket, "expires_in": expires_in}
