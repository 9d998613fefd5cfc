"""
Therapist Profile Validations

Checks:
    - profile payload: identity, body data, languages, badges, scores,
      flags, city and categories
    - live status payload: status, coordinates, next available time
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Field Checks
from ...util.field_checks import FieldChecks

# Helpers
from ...util.helpers import parse_datetime


PROFILE_FIELDS = (
    "girl_number", "username", "name", "profile", "tags", "avatar_url", "birth_date",
    "height", "weight", "measurements", "gender", "languages", "badge", "rating",
    "max_travel_distance", "trust_score", "is_verified", "is_blocked", "is_visible_to_thai",
    "sort_order", "city_id", "category_ids"
)

STATUS_FIELDS = ("status", "current_lat", "current_lng", "next_available_time")





class GirlProfileValidation(FieldChecks):

    def validate(self, args: dict, partial: bool = False) -> dict:
        """
        Validate a therapist profile payload

        Args:
            args: request body
            partial: update mode, only the supplied fields are checked

        Returns:
            dict: cleaned fields
        """

        data = {key: args[key] for key in PROFILE_FIELDS if key in args}

        if partial and not data:
            raise ValidationException(messages.ERROR['NO_FIELDS_TO_UPDATE'])

        if not partial:
            self._require(data, "username", "name", "city_id", "max_travel_distance", "category_ids")

        self._check_int(data, "girl_number", 1, 2 ** 31 - 1, nullable = not partial)
        self._check_code(data, "username", constants.GIRL_USERNAME_MIN_LENGTH, constants.GIRL_USERNAME_MAX_LENGTH)
        self._check_text(data, "name", 1, constants.GIRL_NAME_MAX_LENGTH)
        self._check_localized(data, "profile", nullable = True)
        self._check_tags(data)
        self._check_url(data, "avatar_url")
        self._check_date(data, "birth_date")
        self._check_int(data, "height", 100, 250, nullable = True)
        self._check_int(data, "weight", 30, 200, nullable = True)
        self._check_text(data, "measurements", 0, constants.GIRL_MEASUREMENTS_MAX_LENGTH, nullable = True)
        self._check_choice(data, "gender", constants.GIRL_GENDERS)
        self._check_languages(data)
        self._check_choice(data, "badge", constants.GIRL_BADGES, nullable = True)
        self._check_number(data, "rating", 0, 5)
        self._check_int(data, "max_travel_distance", 1, 100)
        self._check_int(data, "trust_score", 0, 100)
        self._check_bool(data, "is_verified", "is_blocked", "is_visible_to_thai")
        self._check_int(data, "sort_order", 0, constants.SORT_ORDER_MAX)
        self._check_int(data, "city_id", 1, 2 ** 31 - 1)
        self._check_category_ids(data)

        return data


    def _check_tags(self, data: dict):
        if data.get("tags") is None:
            return

        tags = data["tags"]
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValidationException(messages.ERROR['INVALID_LIST'].format("tags"))


    def _check_url(self, data: dict, key: str):
        if data.get(key) is None:
            return

        value = data[key]
        if not isinstance(value, str) or not value.startswith(("http://", "https://")):
            raise ValidationException(messages.ERROR['INVALID_URL'].format(key))


    def _check_languages(self, data: dict):
        if data.get("languages") is None:
            return

        languages = data["languages"]
        if not isinstance(languages, list) or any(lang not in constants.GIRL_LANGUAGES for lang in languages):
            raise ValidationException(
                messages.ERROR['INVALID_CHOICE'].format("languages", ", ".join(constants.GIRL_LANGUAGES))
            )


    def _check_category_ids(self, data: dict):
        if "category_ids" not in data:
            return

        ids = data["category_ids"]
        if not isinstance(ids, list) or not ids \
                or any(isinstance(value, bool) or not isinstance(value, int) or value < 1 for value in ids):
            raise ValidationException(messages.ERROR['CATEGORIES_REQUIRED'])

        data["category_ids"] = list(dict.fromkeys(ids))





class LiveStatusValidation(FieldChecks):

    def validate(self, args: dict) -> dict:

        data = {key: args[key] for key in STATUS_FIELDS if key in args}

        if not data:
            raise ValidationException(messages.ERROR['NO_FIELDS_TO_UPDATE'])

        self._check_choice(data, "status", constants.GIRL_STATUSES)
        self._check_number(data, "current_lat", -90, 90, nullable = True)
        self._check_number(data, "current_lng", -180, 180, nullable = True)

        if "next_available_time" in data:
            try:
                data["next_available_time"] = parse_datetime(data["next_available_time"])
            except (TypeError, ValueError):
                raise ValidationException(messages.ERROR['INVALID_DATE'])

        return data
