"""
Chat Handler
Public API endpoints used by the website chat widget.
"""

# Python Packages
from flask import Response, stream_with_context
from flask_restx import Namespace, Resource

# Request
from .requests.chat_request import ChatRequest

# Validations
from .validations import ChatValidation

# Controller
from .controller import ChatController

# Exceptions
from ..util.exceptions import AppException, InternalServerException

# Config
from .config import chat_config

# Namespace
chat_namespace = Namespace("chat", description = "Website chat: streamed assistant replies")





# ── POST /chat ────────────────────────────────────────────────────────────────
@chat_namespace.route("")
class ChatTurn(Resource):
    """ Send one visitor message and stream the assistant reply... """

    @ChatRequest.apply(chat_namespace)
    def post(self):
        """
        Send a chat turn.

        Request:
        {
            "messages":       [{"role": "user", "content": "What SOC services do you offer?"}],
            "conversationId": "3f2c...",          // omit on the first turn
            "visitorName":    "Dana",             // first turn only
            "visitorEmail":   "dana@example.com"  // first turn only
        }

        Response:
            200 text/event-stream, header X-Conversation-Id: <id>
            data: {"type": "token", "content": "We offer..."}
            data: {"type": "done", "conversationId": "3f2c...", "messageId": 2}
        """

        try:
            data = ChatRequest.get_data()

            ChatValidation.validate_body(data)

            turns           = ChatValidation.validate_messages(data.get("messages"))
            conversation_id = data.get("conversation_id")
            visitor_name    = data.get("visitor_name")
            visitor_email   = data.get("visitor_email")

            ChatValidation.validate_conversation_id(conversation_id)
            if not conversation_id:
                ChatValidation.validate_visitor(visitor_name, visitor_email)

            turn = ChatController().open_turn(
                turns           = turns,
                conversation_id = conversation_id,
                visitor_name    = visitor_name,
                visitor_email   = visitor_email
            )

            response = Response(
                stream_with_context(turn["stream"]),
                mimetype = "text/event-stream"
            )
            response.headers[chat_config.CONVERSATION_ID_HEADER] = turn["conversation_id"]
            response.headers["Cache-Control"] = "no-cache"
            response.headers["X-Accel-Buffering"] = "no"

            return response

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── GET /chat/<conversation_id> ───────────────────────────────────────────────
@chat_namespace.route("/<string:conversation_id>")
class ChatHistory(Resource):
    """ Restore a visitor's conversation... """

    def get(self, conversation_id):
        """ Messages of one conversation, oldest first... """

        try:
            result = ChatController().get_history(conversation_id)
            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
