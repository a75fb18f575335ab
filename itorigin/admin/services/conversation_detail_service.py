"""
Conversation Detail Service

Handles:
    - One conversation with its full ordered message list
"""

# Services
from ...chat.services.conversation_service import ConversationService

# Serializers
from ...util.serializers import conversation_to_dict, message_to_dict





class ConversationDetailService:

    def __init__(self):
        self.conversation_service = ConversationService()


    def get_detail(self, conversation_id: str) -> dict:
        """
        Raises NotFoundException when the id does not resolve.
        """

        conversation = self.conversation_service.get_conversation(conversation_id)
        history      = self.conversation_service.get_messages(conversation_id)

        return {
            "conversation": conversation_to_dict(conversation),
            "messages": [message_to_dict(message) for message in history]
        }
