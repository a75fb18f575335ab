"""
Chat validation for the ingress endpoint.
"""

# Python Packages
import re

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Config
from ..config import chat_config


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")





class ChatValidation:

    @staticmethod
    def validate_body(data):
        if not data:
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_messages(turns):
        """
        Check the turn list and return it normalised to
        [{"role": ..., "content": ...}] with the new user message last.
        """

        if not turns:
            raise ValidationException(
                error_code = "MISSING_MESSAGES",
                message = messages.ERROR["MISSING_MESSAGES"]
            )

        if not isinstance(turns, list):
            raise ValidationException(
                error_code = "INVALID_MESSAGES",
                message = messages.ERROR["INVALID_MESSAGES"]
            )

        normalised = []
        for turn in turns:
            if not isinstance(turn, dict) or not isinstance(turn.get("content"), str):
                raise ValidationException(
                    error_code = "INVALID_MESSAGES",
                    message = messages.ERROR["INVALID_MESSAGES"]
                )

            role = turn.get("role")
            if role not in chat_config.CLIENT_MESSAGE_ROLES:
                raise ValidationException(
                    error_code = "INVALID_MESSAGE_ROLE",
                    message = messages.ERROR["INVALID_MESSAGE_ROLE"].format(
                        roles = ", ".join(chat_config.CLIENT_MESSAGE_ROLES)
                    )
                )

            if len(turn["content"]) > chat_config.CHAT_MESSAGE_MAX_LENGTH:
                raise ValidationException(
                    error_code = "MESSAGE_TOO_LONG",
                    message = messages.ERROR["MESSAGE_TOO_LONG"].format(
                        chat_config.CHAT_MESSAGE_MAX_LENGTH
                    )
                )

            normalised.append({"role": role, "content": turn["content"]})

        last = normalised[-1]

        if last["role"] != "user":
            raise ValidationException(
                error_code = "LAST_MESSAGE_NOT_USER",
                message = messages.ERROR["LAST_MESSAGE_NOT_USER"]
            )

        if not last["content"].strip():
            raise ValidationException(
                error_code = "EMPTY_MESSAGE",
                message = messages.ERROR["EMPTY_MESSAGE"]
            )

        return normalised


    @staticmethod
    def validate_conversation_id(conversation_id):
        if conversation_id is None:
            return

        if not isinstance(conversation_id, str) or not conversation_id.strip():
            raise ValidationException(
                error_code = "INVALID_CONVERSATION_ID",
                message = messages.ERROR["INVALID_CONVERSATION_ID"]
            )


    @staticmethod
    def validate_visitor(visitor_name, visitor_email):
        """
        Visitor details are required to open a new conversation.
        """

        name_min = chat_config.CHAT_VISITOR_NAME_MIN_LENGTH

        if not isinstance(visitor_name, str) or len(visitor_name.strip()) < name_min:
            raise ValidationException(
                error_code = "INVALID_VISITOR_NAME",
                message = messages.ERROR["VISITOR_NAME_MIN"].format(name_min)
            )

        if not isinstance(visitor_email, str) or not EMAIL_PATTERN.match(visitor_email.strip()):
            raise ValidationException(
                error_code = "INVALID_VISITOR_EMAIL",
                message = messages.ERROR["INVALID_VISITOR_EMAIL"]
            )
