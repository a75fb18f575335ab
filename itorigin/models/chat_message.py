"""
Model: ChatMessage
Table: chat_messages

An individual turn in a chat conversation.
Role is either 'user' (website visitor) or 'agent' (assistant).
Messages are ordered by created_at, ties broken by message_id (insertion order).
"""

# Python Packages
from sqlalchemy import func, select
from sqlalchemy.orm import column_property

# Database
from ..config.database import db

# Models
from .chat_conversation import ChatConversation, utc_now


MESSAGE_ROLES = ("user", "agent")





class ChatMessage(db.Model):
    """ One message (user or agent turn) in a conversation... """

    # Table Name
    __tablename__ = "chat_messages"

    message_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    conversation_id = db.Column(
        db.String(64),
        db.ForeignKey("chat_conversations.conversation_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "'user' or 'agent'."
    )

    content = db.Column(db.Text, nullable = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    # Relationship
    conversation = db.relationship("ChatConversation", back_populates = "messages")

    __table_args__ = (
        db.CheckConstraint("role IN ('user', 'agent')", name = "ck_chat_messages_role"),
    )

    def __repr__(self):
        return f"<ChatMessage {self.message_id} role={self.role}>"



# Derived on every load, so it cannot drift from the real row count
ChatConversation.message_count = column_property(
    select(func.count(ChatMessage.message_id))
    .where(ChatMessage.conversation_id == ChatConversation.conversation_id)
    .correlate_except(ChatMessage)
    .scalar_subquery()
)
