""" Anthropic vendor: streamed Claude replies for the website chat... """

from .anthropic_client import AnthropicClient
from .chat_service import ChatService

__all__ = ["AnthropicClient", "ChatService"]
