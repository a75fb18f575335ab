"""
vendors/__init__.py
====================
Public surface of the vendors package.

Chat services import the provider-agnostic factory:

    from ...vendors import ChatService   ← switches via AI_PROVIDER in .env
    service = ChatService()
    for chunk in service.stream_response(messages): ...

ChatService is a factory function, not a class; calling it returns the
configured provider's instance.
"""

from .factory import get_chat_service

ChatService = get_chat_service
