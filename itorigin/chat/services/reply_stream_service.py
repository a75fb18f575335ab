"""
Service: ReplyStreamService
===========================
Streams the assistant's reply for one turn and persists it when complete.

Frames (Server-Sent Events, one JSON object per `data:` line):
  {"type": "token", "content": "..."}                          per chunk
  {"type": "done",  "conversationId": "...", "messageId": 42}  reply stored
  {"type": "error", "error_code": "...", "message": "..."}     turn failed

Persistence rules
-----------------
The agent message is written once, after the provider stream finishes
normally with non-empty text. Provider failures and empty replies end the
stream with an error frame and write nothing. If the client disconnects, the
generator is closed (GeneratorExit) and the partial reply is dropped.
"""

# Python Packages
import json
import logging
from typing import Dict, Iterator, List

# Vendors
from ...vendors import ChatService

# Services
from .conversation_service import ConversationService

# Exceptions & messages
from ...util.exceptions import AppException
from ...util import messages

# Config
from ..config import chat_config, llm_config, prompts


logger = logging.getLogger(__name__)


def sse_frame(payload: Dict) -> str:
    return f"data: {json.dumps(payload)}\n\n"


class ReplyStreamService:
    """
    Turns a persisted user message into a streamed, persisted agent reply.
    """

    def __init__(self):
        self.conversation_service = ConversationService()


    def build_model_messages(self, turns: List[Dict[str, str]]) -> List[Dict[str, str]]:
        """
        System prompt followed by the most recent client turns.
        'agent' is the store's name for the assistant role.
        The window always opens on a user turn.
        """
        window = turns[-chat_config.CHAT_CONTEXT_MAX_MESSAGES:]
        while window and window[0]["role"] != "user":
            window = window[1:]

        model_messages = [{"role": "system", "content": prompts.IT_ORIGIN_SYSTEM_PROMPT}]
        for turn in window:
            role = "assistant" if turn["role"] in ("assistant", "agent") else "user"
            model_messages.append({"role": role, "content": turn["content"]})

        return model_messages


    def stream_reply(self, conversation_id: str, turns: List[Dict[str, str]]) -> Iterator[str]:
        """
        Generator of SSE frames for one turn. The user message must already
        be committed before this is iterated.
        """
        parts = []

        try:
            chat_service = ChatService()
            for chunk in chat_service.stream_response(
                messages    = self.build_model_messages(turns),
                temperature = llm_config.LLM_CHAT_TEMPERATURE,
                max_tokens  = llm_config.LLM_CHAT_MAX_TOKENS
            ):
                parts.append(chunk)
                yield sse_frame({"type": "token", "content": chunk})

        except Exception:
            logger.exception("Completion failed (conversation_id=%s)", conversation_id)
            yield self._error_frame("COMPLETION_FAILED")
            return

        reply = "".join(parts)
        if not reply.strip():
            logger.warning("Empty completion (conversation_id=%s)", conversation_id)
            yield self._error_frame("EMPTY_COMPLETION")
            return

        try:
            message = self.conversation_service.record_agent_message(conversation_id, reply)

        except AppException as error:
            yield self._error_frame(error.error_code)
            return

        logger.info(
            "Turn completed (conversation_id=%s, agent_message_id=%s)",
            conversation_id, message.message_id
        )
        yield sse_frame({
            "type": "done",
            "conversationId": conversation_id,
            "messageId": message.message_id
        })


    def _error_frame(self, error_code: str) -> str:
        return sse_frame({
            "type": "error",
            "error_code": error_code,
            "message": messages.ERROR[error_code]
        })
