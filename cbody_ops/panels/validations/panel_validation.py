"""
City Panel Validations

Checks:
    - busy minutes: whole number between 1 and a day, or absent
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class BusyMinutesValidation:

    def validate(self, minutes):

        if minutes is None:
            return None

        if isinstance(minutes, bool) or not isinstance(minutes, int) \
                or not (1 <= minutes <= constants.PANEL_MAX_BUSY_MINUTES):
            raise ValidationException(
                message = messages.ERROR['INVALID_BUSY_MINUTES'].format(constants.PANEL_MAX_BUSY_MINUTES)
            )

        return minutes
