""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "CONVERSATION_UPDATE_SUCCESS"   :   "Conversation updated successfully.",
    "CONVERSATION_DELETE_SUCCESS"   :   "Conversation deleted successfully.",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "INVALID_REQUEST"               :   "Request body is required.",

    # Chat Ingress Errors
    "MISSING_MESSAGES"              :   "At least one message is required.",
    "INVALID_MESSAGES"              :   "messages must be a list of {role, content} objects.",
    "INVALID_MESSAGE_ROLE"          :   "Message role must be one of: {roles}.",
    "LAST_MESSAGE_NOT_USER"         :   "The last message must come from the user.",
    "EMPTY_MESSAGE"                 :   "Message is required.",
    "MESSAGE_TOO_LONG"              :   "Message must not exceed {} characters.",
    "INVALID_CONVERSATION_ID"       :   "conversationId must be a non-empty string.",
    "VISITOR_NAME_MIN"              :   "Name must be at least {} characters.",
    "INVALID_VISITOR_EMAIL"         :   "Invalid email address.",
    "CONVERSATION_NOT_FOUND"        :   "Conversation not found.",
    "MESSAGE_PERSIST_FAILED"        :   "Unable to save the message.",
    "COMPLETION_FAILED"             :   "The assistant could not reply. Please try again.",
    "EMPTY_COMPLETION"              :   "The assistant returned an empty reply. Please try again.",

    # Admin Errors
    "INVALID_PAGE"                  :   "page must be an integer greater than 0.",
    "INVALID_LIMIT"                 :   "limit must be an integer between 1 and {}.",
    "INVALID_STATUS"                :   "status must be one of: {statuses}.",
    "MISSING_STATUS"                :   "status is required.",
    "CONFIRMATION_REQUIRED"         :   "Deleting a conversation is irreversible. Repeat the request with confirm=true.",
    "CONVERSATION_UPDATE_FAILED"    :   "Unable to update conversation.",
    "CONVERSATION_DELETE_FAILED"    :   "Unable to delete conversation.",

    # Auth Errors
    "MISSING_TOKEN"                 :   "Authorization bearer token is required.",
    "INVALID_TOKEN"                 :   "You are not allowed to access this resource.",
}


