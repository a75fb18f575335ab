"""
Update Conversation Status Validation

Checks:
    - body is present
    - status is provided
    - status is one of active / closed / archived

Any status may move to any other; operators override, there is no workflow.
"""

# Models
from ...models import CONVERSATION_STATUSES

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class UpdateStatusValidation:

    def validate(self, data) -> str:

        if not isinstance(data, dict):
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR['INVALID_REQUEST']
            )

        status = data.get("status")

        if not status:
            raise ValidationException(
                error_code = "MISSING_STATUS",
                message = messages.ERROR['MISSING_STATUS']
            )

        if not isinstance(status, str) or status.strip().lower() not in CONVERSATION_STATUSES:
            raise ValidationException(
                error_code = "INVALID_STATUS",
                message = messages.ERROR['INVALID_STATUS'].format(
                    statuses = ", ".join(CONVERSATION_STATUSES)
                )
            )

        return status.strip().lower()
