"""
Cooldown Validation

Checks:
    - hours is a positive number no larger than the cap
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class CooldownValidation:

    def validate(self, hours):

        if isinstance(hours, bool) or not isinstance(hours, (int, float)):
            raise ValidationException(
                message = messages.ERROR['INVALID_COOLDOWN_HOURS'].format(constants.GIRL_MAX_COOLDOWN_HOURS)
            )

        if hours <= 0 or hours > constants.GIRL_MAX_COOLDOWN_HOURS:
            raise ValidationException(
                message = messages.ERROR['INVALID_COOLDOWN_HOURS'].format(constants.GIRL_MAX_COOLDOWN_HOURS)
            )

        return True
