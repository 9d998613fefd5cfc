"""
User Validations

Checks:
    - profile update fields and ranges
    - ban reason length
    - password length
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


UPDATABLE_FIELDS = ("display_name", "username", "language_code", "timezone", "level", "credit_score", "is_banned")





class UpdateUserValidation:

    def validate(self, args: dict):

        updates = {key: args[key] for key in UPDATABLE_FIELDS if key in args}

        if not updates:
            raise ValidationException(
                message = messages.ERROR['NO_FIELDS_TO_UPDATE']
            )

        for key in ("display_name", "username"):
            if key in updates:
                value = updates[key]
                if not isinstance(value, str) or not (1 <= len(value.strip()) <= 50):
                    raise ValidationException(
                        message = messages.ERROR['INVALID_TEXT_LENGTH'].format(key, 1, 50)
                    )

        if "language_code" in updates and updates["language_code"] not in constants.USER_LANGUAGES:
            raise ValidationException(
                message = messages.ERROR['INVALID_LANGUAGE']
            )

        if "timezone" in updates:
            timezone = updates["timezone"]
            if timezone is not None and (not isinstance(timezone, str) or len(timezone) > 50):
                raise ValidationException(
                    message = messages.ERROR['INVALID_TEXT_LENGTH'].format("timezone", 0, 50)
                )

        self._check_int(updates, "level", 1, 10)
        self._check_int(updates, "credit_score", 0, 1000)

        if "is_banned" in updates and not isinstance(updates["is_banned"], bool):
            raise ValidationException(
                message = messages.ERROR['INVALID_BOOLEAN'].format("is_banned")
            )

        return updates


    def _check_int(self, updates: dict, key: str, low: int, high: int):
        if key not in updates:
            return

        value = updates[key]
        if isinstance(value, bool) or not isinstance(value, int) or not (low <= value <= high):
            raise ValidationException(
                message = messages.ERROR['INVALID_RANGE'].format(key, low, high)
            )





class BanReasonValidation:

    def validate(self, reason):

        if reason is not None and (not isinstance(reason, str) or len(reason) > 200):
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format("reason", 0, 200)
            )

        return True





class UserPasswordValidation:

    def validate(self, password):

        if not isinstance(password, str) or not (8 <= len(password) <= 50):
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format("new_password", 8, 50)
            )

        return True
