"""
chat_config.py: Chat Wire Contract & Limits
=============================================
Values shared by the ingress endpoint, the admin console and ChatClient.

CONVERSATION_ID_HEADER is part of the public contract with every deployed
widget. Do not rename it.
"""

# Response header carrying the governing conversation id
CONVERSATION_ID_HEADER = "X-Conversation-Id"

# Roles accepted from clients in the `messages` array.
# "agent" is tolerated and treated as "assistant" for the model.
CLIENT_MESSAGE_ROLES = ("user", "assistant", "agent")

# Max characters accepted for a single message. Transport guard only;
# the store itself does not bound content length.
CHAT_MESSAGE_MAX_LENGTH = 8_000

# Only the most recent N client turns are forwarded to the model
CHAT_CONTEXT_MAX_MESSAGES = 20

# First-turn visitor details
CHAT_VISITOR_NAME_MIN_LENGTH = 2

# ── Admin Console ──────────────────────────────────────────────────────────────
ADMIN_DEFAULT_PAGE_LIMIT = 20
ADMIN_MAX_PAGE_LIMIT     = 100

# ── Inactivity Sweep ───────────────────────────────────────────────────────────
# `flask chat archive-inactive` archives active conversations idle this long
CHAT_INACTIVITY_ARCHIVE_DAYS = 30
