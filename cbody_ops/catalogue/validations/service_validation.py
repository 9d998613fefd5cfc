"""
Service Catalogue Validations

Checks:
    - service payload: code, category, localised title/description, badge,
      visibility flags, user level, sort order
    - duration payload: allowed minutes, prices in 100 THB steps and ordered
    - bind / unbind / restore payloads: girl_ids, notes
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Field Checks
from ...util.field_checks import FieldChecks


SERVICE_FIELDS = (
    "code", "category_id", "title", "description", "badge", "is_active",
    "is_visible_to_thai", "is_visible_to_english", "min_user_level", "sort_order"
)

DURATION_FIELDS = ("duration_minutes", "default_price", "min_price", "max_price", "is_active")

PRICE_FIELDS = ("default_price", "min_price", "max_price")





class ServiceValidation(FieldChecks):

    def validate(self, args: dict, partial: bool = False) -> dict:
        """
        Validate a service payload

        Args:
            args: request body
            partial: update mode, only the supplied fields are checked

        Returns:
            dict: cleaned fields
        """

        data = {key: args[key] for key in SERVICE_FIELDS if key in args}

        if partial and not data:
            raise ValidationException(messages.ERROR['NO_FIELDS_TO_UPDATE'])

        if not partial:
            self._require(data, "code", "category_id", "title")

        self._check_code(data, "code", 1, constants.SERVICE_CODE_MAX_LENGTH)
        self._check_int(data, "category_id", 1, 2 ** 31 - 1)
        self._check_localized(data, "title")
        self._check_localized(data, "description", nullable = True)
        self._check_choice(data, "badge", constants.SERVICE_BADGES, nullable = True)
        self._check_bool(data, "is_active", "is_visible_to_thai", "is_visible_to_english")
        self._check_int(data, "min_user_level", constants.MIN_USER_LEVEL, constants.MAX_USER_LEVEL)
        self._check_int(data, "sort_order", 0, constants.SORT_ORDER_MAX)

        return data





class DurationValidation(FieldChecks):

    def validate(self, args: dict, partial: bool = False) -> dict:
        """
        Validate a duration payload

        Args:
            args: request body
            partial: update mode

        Returns:
            dict: cleaned fields
        """

        data = {key: args[key] for key in DURATION_FIELDS if key in args}

        if partial and not data:
            raise ValidationException(messages.ERROR['NO_FIELDS_TO_UPDATE'])

        if not partial:
            self._require(data, "duration_minutes", "default_price")

        self._check_choice(data, "duration_minutes", constants.SERVICE_DURATION_MINUTES)
        self._check_bool(data, "is_active")

        for key in PRICE_FIELDS:
            self._check_price(data, key)

        self.check_price_order(data)

        return data


    def check_price_order(self, data: dict, current = None):
        """ min_price <= default_price <= max_price, falling back to current for absent keys... """

        prices = {
            key: data[key] if key in data else getattr(current, key, None)
            for key in PRICE_FIELDS
        }

        bounds = [prices["min_price"], prices["default_price"], prices["max_price"]]
        bounds = [value for value in bounds if value is not None]

        if bounds != sorted(bounds, key = float):
            raise ValidationException(messages.ERROR['INVALID_PRICE_ORDER'])


    def _check_price(self, data: dict, key: str):
        if key not in data:
            return

        value = data[key]
        if key != "default_price" and value is None:
            return

        if isinstance(value, bool) or not isinstance(value, int) \
                or not (constants.SERVICE_PRICE_MIN <= value <= constants.SERVICE_PRICE_MAX) \
                or value % constants.SERVICE_PRICE_STEP:
            raise ValidationException(
                message = messages.ERROR['INVALID_PRICE'].format(
                    key, constants.SERVICE_PRICE_STEP, constants.SERVICE_PRICE_MIN, constants.SERVICE_PRICE_MAX
                )
            )





class GirlIdsValidation:

    def validate(self, girl_ids) -> list:

        if not isinstance(girl_ids, list) or not girl_ids \
                or not all(isinstance(girl_id, str) and girl_id for girl_id in girl_ids):
            raise ValidationException(messages.ERROR['GIRL_IDS_REQUIRED'])

        return list(dict.fromkeys(girl_ids))





class BindingNotesValidation:

    def validate(self, notes, required: bool = True):

        if notes is None or (isinstance(notes, str) and not notes.strip()):
            if required:
                raise ValidationException(messages.ERROR['NOTES_REQUIRED'])
            return None

        if not isinstance(notes, str) or len(notes.strip()) > constants.BIND_NOTES_MAX_LENGTH:
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format(
                    "notes", 1 if required else 0, constants.BIND_NOTES_MAX_LENGTH
                )
            )

        return notes.strip()
