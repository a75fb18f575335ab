"""
Delete Conversation Service

Handles:
    - Delete Conversation
    - Delete its Messages (ORM cascade + ON DELETE CASCADE)
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Services
from ...chat.services.conversation_service import ConversationService

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class DeleteConversationService:

    def __init__(self):
        self.conversation_service = ConversationService()


    def delete_conversation(self, conversation_id: str) -> dict:
        """
        Delete a conversation and every message in it

        Args:
            conversation_id (str)

        Returns:
            dict
        """

        # 🔹 Fetch Conversation (404 when missing, nothing touched)
        conversation = self.conversation_service.get_conversation(conversation_id)
        message_count = conversation.message_count

        try:
            db.session.delete(conversation)

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CONVERSATION_DELETE_FAILED",
                message = messages.ERROR['CONVERSATION_DELETE_FAILED'],
                details = str(errors),
                status_code = 500
            )

        logger.info("Conversation %s deleted with %s messages", conversation_id, message_count)

        return {
            "success": True,
            "conversationId": conversation_id,
            "deletedMessages": message_count,
            "message": messages.SUCCESS['CONVERSATION_DELETE_SUCCESS']
        }
