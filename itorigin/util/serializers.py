""" JSON shapes for conversations and messages... """

# Python Packages
from datetime import datetime, timezone





def format_datetime(value: datetime):
    """ ISO-8601 in UTC, or None... """

    if value is None:
        return None

    # SQLite hands back naive values; they were written as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo = timezone.utc)

    return value.astimezone(timezone.utc).isoformat()



def conversation_to_dict(conversation) -> dict:
    """ Conversation summary, including the derived message count... """

    return {
        "id": conversation.conversation_id,
        "sessionId": conversation.session_id,
        "visitorName": conversation.visitor_name,
        "visitorEmail": conversation.visitor_email,
        "status": conversation.status,
        "messageCount": conversation.message_count,
        "lastMessageAt": format_datetime(conversation.last_message_at),
        "createdAt": format_datetime(conversation.created_at),
        "updatedAt": format_datetime(conversation.updated_at)
    }



def message_to_dict(message) -> dict:
    return {
        "id": message.message_id,
        "conversationId": message.conversation_id,
        "role": message.role,
        "content": message.content,
        "createdAt": format_datetime(message.created_at)
    }
