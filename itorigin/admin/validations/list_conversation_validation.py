"""
List Conversation Validation

Checks:
    - page is a positive integer
    - limit is an integer within the allowed page size
    - status is a known status (or 'all' / empty for no filter)
"""

# Models
from ...models import CONVERSATION_STATUSES

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Config
from ...chat.config import chat_config





class ListConversationValidation:

    def validate(self, args: dict) -> dict:
        """
        Validate query args and return them typed:
        {"page": int, "limit": int, "status": str | None, "search": str | None}
        """

        page = self._to_int(args.get("page"), default = 1)
        if page is None or page < 1:
            raise ValidationException(
                error_code = "INVALID_PAGE",
                message = messages.ERROR['INVALID_PAGE']
            )

        limit = self._to_int(args.get("limit"), default = chat_config.ADMIN_DEFAULT_PAGE_LIMIT)
        if limit is None or limit < 1 or limit > chat_config.ADMIN_MAX_PAGE_LIMIT:
            raise ValidationException(
                error_code = "INVALID_LIMIT",
                message = messages.ERROR['INVALID_LIMIT'].format(chat_config.ADMIN_MAX_PAGE_LIMIT)
            )

        status = (args.get("status") or "").strip().lower()
        if status == "all":
            status = ""

        if status and status not in CONVERSATION_STATUSES:
            raise ValidationException(
                error_code = "INVALID_STATUS",
                message = messages.ERROR['INVALID_STATUS'].format(
                    statuses = ", ".join(CONVERSATION_STATUSES + ("all",))
                )
            )

        search = (args.get("search") or "").strip()

        return {
            "page": page,
            "limit": limit,
            "status": status or None,
            "search": search or None
        }


    def _to_int(self, value, default: int):
        if value is None or value == "":
            return default

        try:
            return int(value)
        except (TypeError, ValueError):
            return None
