"""
Upgrade Validation

Checks:
    - service_duration_id is provided
    - service_duration_id is a positive integer
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class UpgradeValidation:

    def validate(self, args: dict):

        service_duration_id = args.get("service_duration_id")

        if service_duration_id is None:
            raise ValidationException(
                message = messages.ERROR['SERVICE_DURATION_REQUIRED']
            )

        if isinstance(service_duration_id, bool) or not isinstance(service_duration_id, int) or service_duration_id <= 0:
            raise ValidationException(
                message = messages.ERROR['SERVICE_DURATION_REQUIRED']
            )

        return True
