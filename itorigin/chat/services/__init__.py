"""
Chat Services Package

Service responsibilities:
  ConversationService : conversation rows and message persistence
  ReplyStreamService  : streams the assistant reply and stores it when complete
"""

from .conversation_service import ConversationService
from .reply_stream_service import ReplyStreamService

__all__ = [
    "ConversationService",
    "ReplyStreamService",
]
