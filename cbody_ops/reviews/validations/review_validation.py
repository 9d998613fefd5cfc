"""
Review Validations
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


REASON_MAX = 500





class ReviewRejectValidation:

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





class ReviewLevelValidation:

    def validate(self, level) -> int:

        if isinstance(level, bool) or not isinstance(level, int) \
                or not (constants.MIN_USER_LEVEL <= level <= constants.MAX_USER_LEVEL):
            raise ValidationException(
                message = messages.ERROR['INVALID_RANGE'].format(
                    "min_user_level", constants.MIN_USER_LEVEL, constants.MAX_USER_LEVEL
                )
            )

        return level
