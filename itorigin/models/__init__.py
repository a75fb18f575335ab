"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Import order matters: models with foreign keys must be imported after
the models they reference.
"""

from .chat_conversation import ChatConversation, CONVERSATION_STATUSES
from .chat_message import ChatMessage, MESSAGE_ROLES

__all__ = [
    "ChatConversation",
    "ChatMessage",
    "CONVERSATION_STATUSES",
    "MESSAGE_ROLES",
]
