from app.models.conversation import Conversation
from app.models.conversation_message import ConversationMessage
from app.models.responder import Responder
from app.models.user import User

__all__ = [
    "Conversation",
    "ConversationMessage",
    "Responder",
    "User",
]
