"""
Admin Chat Controller

Handles:
    - Orchestration between the admin handler and service layer
"""

# Services
from .services.list_conversation_service import ListConversationService
from .services.conversation_detail_service import ConversationDetailService
from .services.update_status_service import UpdateStatusService
from .services.delete_conversation_service import DeleteConversationService
from .services.conversation_stats_service import ConversationStatsService





class AdminChatController:

    def list_conversations(self, args: dict) -> dict:
        """
        List conversation summaries

        Args:
            args (dict): validated {"page", "limit", "status", "search"}

        Returns:
            dict
        """

        return ListConversationService().list_conversations(
            page = args["page"],
            limit = args["limit"],
            status = args["status"],
            search = args["search"]
        )



    def get_conversation(self, conversation_id: str) -> dict:
        """
        Conversation plus its ordered messages
        """

        return ConversationDetailService().get_detail(conversation_id)



    def update_status(self, conversation_id: str, status: str) -> dict:
        """
        Change the status of a conversation

        Args:
            conversation_id (str)
            status (str): 'active' | 'closed' | 'archived'

        Returns:
            dict
        """

        return UpdateStatusService().update_status(conversation_id, status)



    def delete_conversation(self, conversation_id: str) -> dict:
        """
        Delete conversation and its messages
        """

        return DeleteConversationService().delete_conversation(conversation_id)



    def get_stats(self) -> dict:
        return ConversationStatsService().get_stats()
