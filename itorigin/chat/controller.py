"""
Chat Controller
Orchestrates between handler and service layer.
"""

# Python Packages
from typing import Dict, List, Optional

# Services
from .services.conversation_service import ConversationService
from .services.reply_stream_service import ReplyStreamService

# Serializers
from ..util.serializers import conversation_to_dict, format_datetime





class ChatController:

    def __init__(self):
        """ Initialize services... """

        self.conversation_service = ConversationService()
        self.reply_stream_service = ReplyStreamService()



    def open_turn(
        self,
        turns: List[Dict[str, str]],
        conversation_id: Optional[str] = None,
        visitor_name: Optional[str] = None,
        visitor_email: Optional[str] = None
    ) -> dict:
        """
        Persist the visitor's message, then hand back the reply stream.

        The user message is committed before the stream object is created,
        so a failed write never reaches the model.

        Args:
            turns: Validated client turns; the last one is the new user message.
            conversation_id: Existing conversation, or None to open one.
            visitor_name: Visitor display name (first turn only).
            visitor_email: Visitor email (first turn only).

        Returns:
            Dict with the governing conversation_id and the SSE frame generator.
        """

        conversation, _ = self.conversation_service.record_user_message(
            content         = turns[-1]["content"],
            conversation_id = conversation_id,
            visitor_name    = visitor_name,
            visitor_email   = visitor_email
        )

        return {
            "conversation_id": conversation.conversation_id,
            "stream": self.reply_stream_service.stream_reply(
                conversation.conversation_id, turns
            )
        }



    def get_history(self, conversation_id: str) -> dict:
        """
        Visitor-facing history of one conversation.

        Agent messages are reported with role 'assistant', the role name the
        client uses in its own turn list.
        """

        conversation = self.conversation_service.get_conversation(conversation_id)
        history      = self.conversation_service.get_messages(conversation_id)

        return {
            "conversation": conversation_to_dict(conversation),
            "messages": [
                {
                    "id": message.message_id,
                    "role": "assistant" if message.role == "agent" else "user",
                    "content": message.content,
                    "createdAt": format_datetime(message.created_at)
                }
                for message in history
            ]
        }
