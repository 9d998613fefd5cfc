"""
Field Checks

Shared checks for form-style payloads. Each check reads one key from the
payload, ignores it when absent, and raises ValidationException when the
value is unusable.
"""

# Python Packages
import re
from datetime import date

# Constants
from ..base import constants

# App Messages
from . import messages

# Exceptions
from .exceptions import ValidationException





class FieldChecks:

    def _check_text(self, data: dict, key: str, low: int, high: int, nullable: bool = False):
        if key not in data:
            return

        value = data[key]
        if value is None and nullable:
            return

        if not isinstance(value, str) or not (low <= len(value.strip()) <= high):
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format(key, low, high)
            )

        data[key] = value.strip()


    def _check_code(self, data: dict, key: str, low: int, high: int):
        self._check_text(data, key, low, high)

        if key in data and not re.match(constants.CODE_PATTERN, data[key]):
            raise ValidationException(
                message = messages.ERROR['INVALID_CODE'].format(key)
            )


    def _check_int(self, data: dict, key: str, low: int, high: int, nullable: bool = False):
        if key not in data:
            return

        value = data[key]
        if value is None and nullable:
            return

        if isinstance(value, bool) or not isinstance(value, int) or not (low <= value <= high):
            raise ValidationException(
                message = messages.ERROR['INVALID_RANGE'].format(key, low, high)
            )


    def _check_number(self, data: dict, key: str, low: float, high: float, nullable: bool = False):
        if key not in data:
            return

        value = data[key]
        if value is None and nullable:
            return

        if isinstance(value, bool) or not isinstance(value, (int, float)) or not (low <= value <= high):
            raise ValidationException(
                message = messages.ERROR['INVALID_RANGE'].format(key, low, high)
            )


    def _check_bool(self, data: dict, *keys):
        for key in keys:
            if key in data and not isinstance(data[key], bool):
                raise ValidationException(
                    message = messages.ERROR['INVALID_BOOLEAN'].format(key)
                )


    def _check_choice(self, data: dict, key: str, choices, nullable: bool = False):
        if key not in data:
            return

        value = data[key]
        if value is None and nullable:
            return

        if isinstance(value, bool) or value not in choices:
            raise ValidationException(
                message = messages.ERROR['INVALID_CHOICE'].format(key, ", ".join(str(c) for c in choices))
            )


    def _check_localized(self, data: dict, key: str, nullable: bool = False):
        """ {en, zh, th} with at least one non-blank entry... """

        if key not in data:
            return

        value = data[key]
        if value is None and nullable:
            return

        if not isinstance(value, dict) or any(lang not in constants.USER_LANGUAGES for lang in value):
            raise ValidationException(
                message = messages.ERROR['LOCALIZED_TEXT_REQUIRED'].format(key)
            )

        if any(text is not None and not isinstance(text, str) for text in value.values()):
            raise ValidationException(
                message = messages.ERROR['LOCALIZED_TEXT_REQUIRED'].format(key)
            )

        cleaned = {lang: (text or "").strip() for lang, text in value.items()}
        if not any(cleaned.values()):
            raise ValidationException(
                message = messages.ERROR['LOCALIZED_TEXT_REQUIRED'].format(key)
            )

        data[key] = cleaned


    def _check_date(self, data: dict, key: str):
        if key not in data or data[key] is None:
            return

        try:
            data[key] = date.fromisoformat(data[key])
        except (TypeError, ValueError):
            raise ValidationException(
                message = messages.ERROR['INVALID_DATE_VALUE'].format(key)
            )


    def _require(self, data: dict, *keys):
        for key in keys:
            if data.get(key) is None:
                raise ValidationException(
                    message = messages.ERROR['FIELD_REQUIRED'].format(key)
                )
