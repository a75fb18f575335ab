"""
Update Conversation Status Request

Handles:
    - Swagger body model for PATCH /admin/chat/<id>
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request

# Models
from ...models import CONVERSATION_STATUSES





class UpdateStatusRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for a status change
        """

        model = namespace.model("UpdateConversationStatusRequest", {
            "status": fields.String(
                required = True,
                description = "New conversation status",
                enum = list(CONVERSATION_STATUSES)
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True)
