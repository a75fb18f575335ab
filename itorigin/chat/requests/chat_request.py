"""
Chat Turn Request

Handles:
    - Swagger body model for POST /chat
    - Extract JSON payload (accepts the short {"message": "..."} form too)
"""

from flask_restx import fields
from flask import request





class ChatRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for a chat turn
        """

        message = namespace.model("ChatTurnMessage", {
            "role": fields.String(
                required = True,
                description = "'user' or 'assistant'",
                enum = ["user", "assistant"]
            ),
            "content": fields.String(required = True)
        })

        model = namespace.model("ChatTurnRequest", {
            "messages": fields.List(
                fields.Nested(message),
                required = True,
                description = "Prior turns plus the new user message (last)"
            ),
            "conversationId": fields.String(
                description = "Value of X-Conversation-Id from an earlier turn; omit on the first turn"
            ),
            "visitorName": fields.String(description = "Required on the first turn"),
            "visitorEmail": fields.String(description = "Required on the first turn")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body, or None when it is missing or not an object
        """

        data = request.get_json(silent = True)
        if not isinstance(data, dict):
            return None

        messages = data.get("messages")
        if messages is None and "message" in data:
            messages = [{"role": "user", "content": data.get("message")}]

        return {
            "messages": messages,
            # An empty id means "no conversation yet"
            "conversation_id": data.get("conversationId") or None,
            "visitor_name": data.get("visitorName"),
            "visitor_email": data.get("visitorEmail")
        }
