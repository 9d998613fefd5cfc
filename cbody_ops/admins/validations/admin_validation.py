"""
Admin Validations

Checks:
    - create payload: email, password length, display name, known role
    - display name: not blank, max length
    - password: min length
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


DISPLAY_NAME_MAX = 50
PASSWORD_MIN = 8





class DisplayNameValidation:

    def validate(self, display_name):

        if not isinstance(display_name, str) or not display_name.strip():
            raise ValidationException(
                message = messages.ERROR['DISPLAY_NAME_REQUIRED']
            )

        if len(display_name.strip()) > DISPLAY_NAME_MAX:
            raise ValidationException(
                message = messages.ERROR['DISPLAY_NAME_TOO_LONG'].format(DISPLAY_NAME_MAX)
            )

        return True





class AdminPasswordValidation:

    def validate(self, password):

        if not isinstance(password, str) or len(password) < PASSWORD_MIN:
            raise ValidationException(
                message = messages.ERROR['PASSWORD_TOO_SHORT'].format(PASSWORD_MIN)
            )

        return True





class CreateAdminValidation:

    def validate(self, args: dict):

        email = (args.get("email") or "").strip()

        if not email or "@" not in email:
            raise ValidationException(
                message = messages.ERROR['INVALID_EMAIL']
            )

        AdminPasswordValidation().validate(args.get("password"))
        DisplayNameValidation().validate(args.get("display_name"))

        if args.get("role") not in constants.ADMIN_ROLES:
            raise ValidationException(
                message = messages.ERROR['INVALID_ROLE']
            )

        return True
