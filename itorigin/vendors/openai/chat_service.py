"""OpenAI Chat/Completion Service"""

# Python Packages
from typing import Dict, Iterator, List

from .openai_client import OpenAIClient

# Constants
from ...base import constants





class ChatService:
    """Service for streamed chat completions using OpenAI"""

    def __init__(self):
        """Initialize chat service"""
        self.client = OpenAIClient().get_client()
        self.default_model = constants.OPENAI_DEFAULT_MODEL



    def stream_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.7,
        max_tokens: int = 1000
    ) -> Iterator[str]:
        """
        Stream a chat completion, yielding text deltas as they arrive.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: OpenAI model to use
            temperature: Sampling temperature (0-2)
            max_tokens: Maximum tokens in response

        Yields:
            Non-empty text fragments in generation order.
            API errors (at connect time or mid-stream) propagate to the caller.
        """
        stream = self.client.chat.completions.create(
            model = model or self.default_model,
            messages = messages,
            temperature = temperature,
            max_tokens = max_tokens,
            stream = True
        )

        for chunk in stream:
            if not chunk.choices:
                continue

            delta = chunk.choices[0].delta.content
            if delta:
                yield delta
