"""
Login Validation

Checks:
    - email is provided and looks like an email
    - password is provided
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class LoginValidation:

    def validate(self, args: dict):

        email = (args.get("email") or "").strip()
        password = args.get("password") or ""

        if not email or "@" not in email:
            raise ValidationException(
                message = messages.ERROR['INVALID_EMAIL']
            )

        if not password:
            raise ValidationException(
                message = messages.ERROR['PASSWORD_REQUIRED']
            )

        return True
