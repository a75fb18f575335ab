"""
List Conversation Request

Handles:
    - Swagger query parameters for GET /admin/chat
    - Extract raw query args (validated later)
"""

# Python Packages
from flask import request as flask_request

# Config
from ...chat.config import chat_config





class ListConversationRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.param('page', 'Page number (1-based)', _in = 'query', type = 'integer', default = 1)(func)
            func = namespace.param(
                'limit',
                f'Page size (max {chat_config.ADMIN_MAX_PAGE_LIMIT})',
                _in = 'query',
                type = 'integer',
                default = chat_config.ADMIN_DEFAULT_PAGE_LIMIT
            )(func)
            func = namespace.param(
                'status',
                "'active', 'closed', 'archived' or 'all'",
                _in = 'query'
            )(func)
            func = namespace.param('search', 'Visitor email contains', _in = 'query')(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return {
            "page": flask_request.args.get("page"),
            "limit": flask_request.args.get("limit"),
            "status": flask_request.args.get("status"),
            "search": flask_request.args.get("search")
        }
