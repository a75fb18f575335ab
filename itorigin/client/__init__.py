""" Python client for the chat ingress endpoint... """

from .chat_client import (
    ChatClient,
    ChatClientError,
    ChatBusyError,
    ChatRequestError,
    ChatStreamError,
)

__all__ = [
    "ChatClient",
    "ChatClientError",
    "ChatBusyError",
    "ChatRequestError",
    "ChatStreamError",
]
