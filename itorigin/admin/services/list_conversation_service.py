"""
List Conversation Service

Handles:
    - Paginated conversation summaries, newest activity first
    - Filter by status
    - Search by visitor email (case-insensitive substring)
"""

# Python Packages
import math

# Models
from ...models import ChatConversation

# Serializers
from ...util.serializers import conversation_to_dict





class ListConversationService:

    def list_conversations(
        self,
        page: int,
        limit: int,
        status: str = None,
        search: str = None
    ) -> dict:
        """
        Fetch one page of conversation summaries

        Args:
            page (int): 1-based page number
            limit (int): page size
            status (str): exact status filter, or None
            search (str): visitor email substring, or None

        Returns:
            dict: {"conversations": [...], "pagination": {...}}
            total counts the filtered rows, not the whole table.
        """

        query = ChatConversation.query

        # 🔎 Apply Filters
        if status:
            query = query.filter(ChatConversation.status == status)

        if search:
            query = query.filter(
                ChatConversation.visitor_email.ilike(f"%{self._escape_like(search)}%", escape = "\\")
            )

        query = query.order_by(
            ChatConversation.last_message_at.desc().nulls_last(),
            ChatConversation.created_at.desc()
        )

        pagination = query.paginate(page = page, per_page = limit, error_out = False)

        return {
            "conversations": [
                conversation_to_dict(conversation)
                for conversation in pagination.items
            ],
            "pagination": {
                "page": page,
                "limit": limit,
                "total": pagination.total,
                "totalPages": math.ceil(pagination.total / limit)
            }
        }


    def _escape_like(self, value: str) -> str:
        """ Treat % and _ typed by the operator literally... """

        return (
            value.replace("\\", "\\\\")
            .replace("%", "\\%")
            .replace("_", "\\_")
        )
