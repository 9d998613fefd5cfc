"""
Finance Validations

Checks:
    - deposit amount is a non-negative number
    - settlement payment updates: amounts, content type, payment method
    - rejection reasons are present
"""

# Python Packages
from decimal import Decimal, InvalidOperation

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


PAYMENT_FIELDS = (
    "customer_paid_to_platform",
    "actual_paid_amount",
    "platform_should_get",
    "payment_content_type",
    "payment_method",
    "payment_notes",
    "notes"
)





def _amount(value, key: str, allow_none: bool = False):
    if value is None and allow_none:
        return None

    if isinstance(value, bool) or value is None:
        raise ValidationException(messages.ERROR['INVALID_AMOUNT'].format(key))

    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationException(messages.ERROR['INVALID_AMOUNT'].format(key))

    if not amount.is_finite() or amount < 0:
        raise ValidationException(messages.ERROR['INVALID_AMOUNT'].format(key))

    return amount





class DepositValidation:

    def validate(self, args: dict):
        return _amount(args.get("deposit_amount"), "deposit_amount")





class PaymentUpdateValidation:

    def validate(self, args: dict) -> dict:

        updates = {key: args[key] for key in PAYMENT_FIELDS if key in args}

        if not updates:
            raise ValidationException(
                message = messages.ERROR['NO_FIELDS_TO_UPDATE']
            )

        for key in ("customer_paid_to_platform", "platform_should_get"):
            if key in updates:
                updates[key] = _amount(updates[key], key)

        if "actual_paid_amount" in updates:
            updates["actual_paid_amount"] = _amount(updates["actual_paid_amount"], "actual_paid_amount", allow_none = True)

        content_type = updates.get("payment_content_type")
        if content_type is not None and content_type not in constants.PAYMENT_CONTENT_TYPES:
            raise ValidationException(
                message = messages.ERROR['INVALID_PAYMENT_CONTENT_TYPE']
            )

        method = updates.get("payment_method")
        if method is not None and method not in constants.PAYMENT_METHODS:
            raise ValidationException(
                message = messages.ERROR['INVALID_PAYMENT_METHOD']
            )

        for key in ("payment_notes", "notes"):
            value = updates.get(key)
            if value is None:
                continue

            if not isinstance(value, str) or len(value) > constants.PAYMENT_NOTES_MAX_LENGTH:
                raise ValidationException(
                    message = messages.ERROR['INVALID_TEXT_LENGTH'].format(key, 0, constants.PAYMENT_NOTES_MAX_LENGTH)
                )

        return updates





class RejectReasonValidation:

    def validate(self, reason, max_length: int = 500):

        if not isinstance(reason, str) or not reason.strip():
            raise ValidationException(
                message = messages.ERROR['REASON_REQUIRED']
            )

        if len(reason.strip()) > max_length:
            raise ValidationException(
                message = messages.ERROR['INVALID_TEXT_LENGTH'].format("reason", 1, max_length)
            )

        return True
