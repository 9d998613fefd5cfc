"""
Report Validations
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class ResolveReportValidation:

    def validate(self, admin_notes):
        """ Notes are optional; blank becomes None... """

        if admin_notes is None:
            return None

        if not isinstance(admin_notes, str):
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format("admin_notes", 0, constants.ADMIN_NOTES_MAX_LENGTH)
            )

        admin_notes = admin_notes.strip()

        if len(admin_notes) > constants.ADMIN_NOTES_MAX_LENGTH:
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format("admin_notes", 0, constants.ADMIN_NOTES_MAX_LENGTH)
            )

        return admin_notes or None
