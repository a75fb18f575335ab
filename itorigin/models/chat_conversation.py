"""
Model: ChatConversation
Table: chat_conversations

One row per website chat session. The row is created together with the
visitor's first message; the widget opening alone never creates one.
Messages are stored in chat_messages.

message_count is attached in models/chat_message.py as a read-time
COUNT(*) subquery, never a stored counter.
"""

# Python Packages
from datetime import datetime, timezone
import uuid

# Database
from ..config.database import db


CONVERSATION_STATUSES = ("active", "closed", "archived")


def utc_now():
    return datetime.now(timezone.utc)


def new_id():
    return uuid.uuid4().hex





class ChatConversation(db.Model):
    """ A chat thread between one website visitor and the assistant... """

    __tablename__ = "chat_conversations"

    conversation_id = db.Column(
        db.String(64),
        primary_key = True,
        default = new_id,
        doc = "Opaque identifier returned to the client in X-Conversation-Id."
    )

    session_id = db.Column(
        db.String(64),
        nullable = False,
        default = new_id,
        doc = "Opaque id of the browser chat session that opened the thread."
    )

    visitor_name = db.Column(db.String(255), nullable = True)

    visitor_email = db.Column(db.String(255), nullable = True, index = True)

    status = db.Column(
        db.String(20),
        nullable = False,
        default = "active",
        doc = "'active', 'closed' or 'archived'. Changed only by operators or the sweep."
    )

    last_message_at = db.Column(
        db.DateTime(timezone = True),
        nullable = True,
        doc = "created_at of the newest message."
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    # Relationship
    messages = db.relationship(
        "ChatMessage",
        back_populates = "conversation",
        cascade = "all, delete-orphan",
        order_by = "ChatMessage.message_id"
    )

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('active', 'closed', 'archived')",
            name = "ck_chat_conversations_status"
        ),
    )

    def __repr__(self):
        return f"<ChatConversation {self.conversation_id} status={self.status}>"
