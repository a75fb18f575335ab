"""
vendors/anthropic/anthropic_client.py
======================================
Process-wide Anthropic client used when AI_PROVIDER=anthropic.

The SDK retries failed requests by default; a failed reply must surface to
the visitor as an error frame instead, so retries are switched off here.
"""

# Python Packages
from anthropic import Anthropic

# Constants
from ...base import constants





class AnthropicClient:
    """ Singleton wrapper around anthropic.Anthropic... """

    _instance = None
    _client   = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(AnthropicClient, cls).__new__(cls)
            cls._client   = Anthropic(
                api_key     = constants.ANTHROPIC_API_KEY,
                timeout     = constants.LLM_TIMEOUT_SECONDS,
                max_retries = constants.LLM_MAX_RETRIES
            )
        return cls._instance


    def get_client(self) -> Anthropic:
        if self._client is None:
            raise RuntimeError("Anthropic client not initialized. Set ANTHROPIC_API_KEY.")
        return self._client
