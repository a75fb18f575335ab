"""
Conversation Stats Service

Handles:
    - Conversation counts per status for the admin dashboard
"""

# Python Packages
from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models import ChatConversation, CONVERSATION_STATUSES





class ConversationStatsService:

    def get_stats(self) -> dict:

        rows = (
            db.session.query(ChatConversation.status, func.count(ChatConversation.conversation_id))
            .group_by(ChatConversation.status)
            .all()
        )

        counts = {status: 0 for status in CONVERSATION_STATUSES}
        for status, count in rows:
            counts[status] = count

        return {
            "total": sum(counts.values()),
            "activeChats": counts["active"],
            "byStatus": counts
        }
