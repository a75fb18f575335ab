"""
vendors/factory.py: AI Provider Factory
==========================================
Single place that decides which AI provider streams the assistant replies.

How to switch providers
------------------------
In your .env file, set:

    AI_PROVIDER=openai       ← GPT models (default)
    AI_PROVIDER=anthropic    ← Claude models

That's the ONLY change needed. The chat services call
`stream_response(messages, temperature, max_tokens)` and never import a
provider directly.
"""

# Python Packages
import logging

# Constants
from ..base import constants


logger = logging.getLogger(__name__)





def get_chat_service():
    """
    Return the correct ChatService instance based on AI_PROVIDER env variable.

    Returns:
        ChatService with a stream_response(messages, model, temperature, max_tokens) method.

    Raises:
        ValueError: If AI_PROVIDER is set to an unsupported value.
    """

    provider = constants.AI_PROVIDER.lower().strip()

    if provider == "anthropic":
        from .anthropic.chat_service import ChatService
        logger.debug("LLM Provider: Anthropic (%s)", constants.ANTHROPIC_DEFAULT_MODEL)
        return ChatService()

    elif provider == "openai":
        from .openai.chat_service import ChatService
        logger.debug("LLM Provider: OpenAI (%s)", constants.OPENAI_DEFAULT_MODEL)
        return ChatService()

    else:
        raise ValueError(
            f"Unsupported AI_PROVIDER='{provider}'. "
            f"Allowed values: 'anthropic', 'openai'. "
            f"Check your .env file."
        )
