"""
Delete Conversation Validation

Deletion cascades to every message and cannot be undone, so the caller
has to confirm explicitly with ?confirm=true.
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


CONFIRM_VALUES = {"true", "1", "yes"}





class DeleteConversationValidation:

    def validate(self, confirm) -> bool:

        if (confirm or "").strip().lower() not in CONFIRM_VALUES:
            raise ValidationException(
                error_code = "CONFIRMATION_REQUIRED",
                message = messages.ERROR['CONFIRMATION_REQUIRED']
            )

        return True
