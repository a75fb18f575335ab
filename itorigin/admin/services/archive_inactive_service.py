"""
Archive Inactive Service

Handles:
    - Moving idle `active` conversations to `archived`

Run by an external scheduler through `flask chat archive-inactive`;
the ingress endpoint never archives anything itself.
"""

# Python Packages
import logging
from datetime import timedelta

from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models import ChatConversation
from ...models.chat_conversation import utc_now

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class ArchiveInactiveService:

    def archive_inactive(self, days: int, dry_run: bool = False) -> dict:
        """
        Archive active conversations with no message for `days` days

        Args:
            days (int): idle threshold
            dry_run (bool): report matches without writing

        Returns:
            dict: {"cutoff": datetime, "conversation_ids": [...], "archived": int}
        """

        now    = utc_now()
        cutoff = now - timedelta(days = days)

        last_activity = func.coalesce(ChatConversation.last_message_at, ChatConversation.created_at)

        idle = (
            ChatConversation.query
            .filter(ChatConversation.status == "active")
            .filter(last_activity < cutoff)
            .all()
        )

        conversation_ids = [conversation.conversation_id for conversation in idle]

        if dry_run or not idle:
            return {"cutoff": cutoff, "conversation_ids": conversation_ids, "archived": 0}

        try:
            for conversation in idle:
                conversation.status     = "archived"
                conversation.updated_at = now

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CONVERSATION_UPDATE_FAILED",
                message = messages.ERROR['CONVERSATION_UPDATE_FAILED'],
                details = str(errors),
                status_code = 500
            )

        logger.info("Archived %s inactive conversations (cutoff %s)", len(idle), cutoff.isoformat())

        return {"cutoff": cutoff, "conversation_ids": conversation_ids, "archived": len(idle)}
