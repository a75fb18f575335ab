"""
vendors/anthropic/chat_service.py
===================================
ChatService implementation using Anthropic Claude models.

Implements the same interface as vendors/openai/chat_service.py so the
factory can swap providers transparently.

Key difference from OpenAI:
  Anthropic separates the system prompt from the messages array.
  OpenAI sends system as {"role": "system", "content": "..."} inside messages.
  Anthropic takes system as a top-level parameter and messages must only
  contain "user" and "assistant" roles.

This class handles that conversion internally. Callers always pass messages
in the OpenAI format and this service splits them before calling the API.
"""

# Python Packages
from typing import Dict, Iterator, List

# Client
from .anthropic_client import AnthropicClient

# Constants
from ...base import constants





class ChatService:
    """
    Anthropic Claude implementation of ChatService.
    Drop-in replacement for vendors/openai/chat_service.py.
    """

    def __init__(self):
        self.client        = AnthropicClient().get_client()
        self.default_model = constants.ANTHROPIC_DEFAULT_MODEL


    def stream_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.7,
        max_tokens: int = 1000
    ) -> Iterator[str]:
        """
        Stream a reply from the Anthropic Messages API.

        Args:
            messages:    List of message dicts with 'role' and 'content'.
            model:       Claude model string. Defaults to ANTHROPIC_DEFAULT_MODEL.
            temperature: Sampling temperature (0.0 – 1.0).
            max_tokens:  Maximum tokens in response.

        Yields:
            Text fragments in generation order.
        """

        system_prompt, conversation = self._split_messages(messages)

        kwargs = dict(
            model       = model or self.default_model,
            max_tokens  = max_tokens,
            temperature = min(temperature, 1.0),
            messages    = conversation,
        )

        # Anthropic ignores empty system strings, only pass if present
        if system_prompt:
            kwargs["system"] = system_prompt

        with self.client.messages.stream(**kwargs) as stream:
            for text in stream.text_stream:
                if text:
                    yield text



    # ── Private ────────────────────────────────────────────────────────────────
    def _split_messages(self, messages: List[Dict[str, str]]):
        """
        Split OpenAI-style messages into Anthropic format.

        Returns:
            (system_prompt: str, conversation: List[Dict])

        Rules:
          - Leading "system" messages become the top-level system prompt.
          - All "user" and "assistant" messages form the conversation array.
          - Later system messages are prepended to the next user message.
        """
        system_parts   = []
        conversation   = []
        pending_system = []

        for msg in messages:
            role    = msg.get("role", "user")
            content = msg.get("content", "")

            if role == "system":
                if not conversation:
                    system_parts.append(content)
                else:
                    pending_system.append(content)

            elif role in ("user", "assistant"):
                if pending_system and role == "user":
                    content = "\n\n".join(pending_system) + "\n\n" + content
                    pending_system = []
                conversation.append({"role": role, "content": content})

        system_prompt = "\n\n".join(system_parts)
        return system_prompt, conversation
