"""
Update Conversation Status Service

Handles:
    - Operator status override (any status to any other)
    - Setting the current status again is a no-op
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.chat_conversation import utc_now

# Services
from ...chat.services.conversation_service import ConversationService

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Serializers
from ...util.serializers import conversation_to_dict


logger = logging.getLogger(__name__)





class UpdateStatusService:

    def __init__(self):
        self.conversation_service = ConversationService()


    def update_status(self, conversation_id: str, status: str) -> dict:
        """
        Update the status of one conversation

        Args:
            conversation_id (str)
            status (str): validated target status

        Returns:
            dict
        """

        conversation = self.conversation_service.get_conversation(conversation_id)

        if conversation.status == status:
            return {"conversation": conversation_to_dict(conversation)}

        previous = conversation.status

        try:
            conversation.status     = status
            conversation.updated_at = utc_now()

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CONVERSATION_UPDATE_FAILED",
                message = messages.ERROR['CONVERSATION_UPDATE_FAILED'],
                details = str(errors),
                status_code = 500
            )

        logger.info("Conversation %s status %s -> %s", conversation_id, previous, status)

        return {
            "conversation": conversation_to_dict(conversation),
            "message": messages.SUCCESS['CONVERSATION_UPDATE_SUCCESS']
        }
