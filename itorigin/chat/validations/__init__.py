from .chat_validation import ChatValidation

__all__ = ["ChatValidation"]
