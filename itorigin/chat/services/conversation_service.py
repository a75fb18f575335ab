"""
Service: ConversationService

Creates, reads and appends to website chat conversations.

Data tables:
  chat_conversations → one row per visitor chat session
  chat_messages      → one row per message (role 'user' or 'agent')

Design:
  - A conversation row is written only together with its first user message,
    in the same commit, so abandoned widgets never leave orphan rows.
  - last_message_at is set to the created_at of the message being written,
    in the same commit as the message.
  - Every write rolls back on failure and raises; callers decide what the
    visitor sees. Nothing is retried here.
  - History is returned oldest first (created_at, then message_id).
"""

# Python Packages
import logging
from typing import List, Optional, Tuple

# Database
from ...config.database import db

# Models
from ...models import ChatConversation, ChatMessage
from ...models.chat_conversation import utc_now

# Exceptions & messages
from ...util.exceptions import NotFoundException, ServiceException
from ...util import messages


logger = logging.getLogger(__name__)


class ConversationService:
    """
    Manages conversation rows and message persistence for the ingress endpoint.
    """

    # ── Lookup ─────────────────────────────────────────────────────────────────

    def get_conversation(self, conversation_id: str) -> ChatConversation:
        """
        Return the conversation or raise NotFoundException.
        """
        conversation = db.session.get(ChatConversation, conversation_id)

        if conversation is None:
            raise NotFoundException(
                message = messages.ERROR["CONVERSATION_NOT_FOUND"],
                error_code = "CONVERSATION_NOT_FOUND"
            )

        return conversation

    # ── Message Persistence ────────────────────────────────────────────────────

    def record_user_message(
        self,
        content: str,
        conversation_id: Optional[str] = None,
        visitor_name: Optional[str] = None,
        visitor_email: Optional[str] = None
    ) -> Tuple[ChatConversation, ChatMessage]:
        """
        Persist the visitor's message, opening a conversation if needed.

        Args:
            content:         The new user message text.
            conversation_id: Existing conversation, or None to start one.
            visitor_name:    Used only when a conversation is created.
            visitor_email:   Used only when a conversation is created.

        Returns:
            (conversation, message), both committed.

        Raises:
            NotFoundException: conversation_id does not resolve.
            ServiceException:  the write failed (nothing was committed).
        """
        if conversation_id:
            conversation = self.get_conversation(conversation_id)
        else:
            conversation = ChatConversation(
                visitor_name  = visitor_name.strip() if visitor_name else None,
                visitor_email = visitor_email.strip().lower() if visitor_email else None,
                status        = "active"
            )
            db.session.add(conversation)

        try:
            message = self._append(conversation, "user", content)
            db.session.commit()

        except Exception as exc:
            db.session.rollback()
            logger.error("record_user_message failed (conversation_id=%s): %s", conversation_id, exc)
            raise ServiceException(
                error_code = "MESSAGE_PERSIST_FAILED",
                message = messages.ERROR["MESSAGE_PERSIST_FAILED"],
                details = str(exc),
                status_code = 500
            )

        if not conversation_id:
            logger.info("New conversation created: %s", conversation.conversation_id)

        return conversation, message


    def record_agent_message(self, conversation_id: str, content: str) -> ChatMessage:
        """
        Persist a completed assistant reply.

        Raises:
            NotFoundException: the conversation was deleted mid-stream.
            ServiceException:  the write failed.
        """
        conversation = self.get_conversation(conversation_id)

        try:
            message = self._append(conversation, "agent", content)
            db.session.commit()
            return message

        except Exception as exc:
            db.session.rollback()
            logger.error("record_agent_message failed (conversation_id=%s): %s", conversation_id, exc)
            raise ServiceException(
                error_code = "MESSAGE_PERSIST_FAILED",
                message = messages.ERROR["MESSAGE_PERSIST_FAILED"],
                details = str(exc),
                status_code = 500
            )

    # ── History Retrieval ──────────────────────────────────────────────────────

    def get_messages(self, conversation_id: str) -> List[ChatMessage]:
        """
        Return every message of a conversation, oldest first.
        """
        return (
            ChatMessage.query
            .filter_by(conversation_id = conversation_id)
            .order_by(ChatMessage.created_at.asc(), ChatMessage.message_id.asc())
            .all()
        )

    # ── Private ────────────────────────────────────────────────────────────────

    def _append(self, conversation: ChatConversation, role: str, content: str) -> ChatMessage:
        now = utc_now()

        message = ChatMessage(
            conversation = conversation,
            role         = role,
            content      = content,
            created_at   = now
        )
        db.session.add(message)

        conversation.last_message_at = now
        conversation.updated_at      = now

        db.session.flush()
        return message
