"""
File: Admin Chat Routes

Handles:
    - List Conversations
    - Conversation Stats
    - Conversation Detail
    - Update Conversation Status
    - Delete Conversation

Every route requires the admin bearer token.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Requests
from .requests.list_conversation_request import ListConversationRequest
from .requests.update_status_request import UpdateStatusRequest

# Validations
from .validations.list_conversation_validation import ListConversationValidation
from .validations.update_status_validation import UpdateStatusValidation
from .validations.delete_conversation_validation import DeleteConversationValidation

# Controller
from .controller import AdminChatController

# Auth
from ..util.auth import admin_required

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
admin_namespace = Namespace(
    'admin',
    path = '/admin/chat',
    description = 'Chat conversation console',
    decorators = [admin_required]
)





@admin_namespace.route('')
class ConversationList(Resource):

    @admin_namespace.doc(security = 'Bearer Auth')
    @ListConversationRequest.apply(admin_namespace)
    def get(self):
        """
        List conversations (paginated, filter by status, search by email)
        """

        try:
            # Args
            args = ListConversationRequest.get_data()

            # Validations
            args = ListConversationValidation().validate(args)

            # Controller
            result = AdminChatController().list_conversations(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/stats')
class ConversationStats(Resource):

    @admin_namespace.doc(security = 'Bearer Auth')
    def get(self):
        """
        Conversation counts per status
        """

        try:
            result = AdminChatController().get_stats()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/<string:conversation_id>')
class ConversationDetail(Resource):

    @admin_namespace.doc(security = 'Bearer Auth')
    def get(self, conversation_id):
        """
        Conversation with its full message history
        """

        try:
            result = AdminChatController().get_conversation(conversation_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @admin_namespace.doc(security = 'Bearer Auth')
    @UpdateStatusRequest.apply(admin_namespace)
    def patch(self, conversation_id):
        """
        Change conversation status (active / closed / archived)
        """

        try:
            # Validations
            status = UpdateStatusValidation().validate(UpdateStatusRequest.get_data())

            # Controller
            result = AdminChatController().update_status(conversation_id, status)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @admin_namespace.doc(security = 'Bearer Auth', params = {'confirm': 'Must be true'})
    def delete(self, conversation_id):
        """
        Delete conversation and all its messages (irreversible)
        """

        try:
            # Validations
            DeleteConversationValidation().validate(request.args.get("confirm"))

            # Controller
            result = AdminChatController().delete_conversation(conversation_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
