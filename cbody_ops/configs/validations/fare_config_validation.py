"""
Fare Config Validation

Every parameter is required. Amounts must be non-negative; multipliers and
rounding have their own ranges; toggles must be real booleans.
"""

# Python Packages
import math

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


# field: (min, max) with None for open ends
NUMBER_FIELDS = {
    "baseFare": (0, None),
    "freeDistanceKm": (0, None),
    "tier1PerKm": (0, None),
    "tier2PerKm": (0, None),
    "tier3PerKm": (0, None),
    "perMin": (0, None),
    "tripMultiplier": (1, 3),
    "minFare": (0, None),
    "roundUpTo": (1, None),
    "rain_multiplier": (1, 2),
    "congestion_multiplier": (1, 2),
    "eta_buffer_min_base": (0, None),
    "eta_buffer_min_rain": (0, None),
    "eta_buffer_min_congestion": (0, None)
}

BOOLEAN_FIELDS = ("rain_enabled", "congestion_enabled")





class FareConfigValidation:

    def validate(self, data: dict) -> dict:
        """
        Validate fare parameters

        Returns:
            dict: the parameters, limited to the known fields
        """

        if not isinstance(data, dict) or not data:
            raise ValidationException(messages.ERROR['FARE_PARAMS_REQUIRED'])

        params = {}

        for field, (minimum, maximum) in NUMBER_FIELDS.items():
            value = data.get(field)

            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValidationException(
                    message = messages.ERROR['INVALID_NUMBER'].format(field)
                )

            if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
                raise ValidationException(
                    message = messages.ERROR['INVALID_RANGE'].format(
                        field, minimum, maximum if maximum is not None else "∞"
                    )
                )

            params[field] = value

        for field in BOOLEAN_FIELDS:
            value = data.get(field)

            if not isinstance(value, bool):
                raise ValidationException(
                    message = messages.ERROR['INVALID_BOOLEAN'].format(field)
                )

            params[field] = value

        return params
