"""
chat/config/__init__.py
=======================
Public surface of the chat configuration package.

Config files:
  chat_config : wire contract & limits (header name, message caps, context window)
  llm_config  : temperature & max_tokens for the assistant reply
  prompts     : the assistant system prompt
"""

from . import chat_config
from . import llm_config
from . import prompts
