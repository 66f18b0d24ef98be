from app.services.conversation_message_service import ConversationMessageService
from app.services.conversation_service import ConversationService
from app.services.reply_dispatcher import ReplyDispatcher
from app.services.responder_service import ResponderService
from app.services.user_service import UserService

__all__ = [
    "ConversationMessageService",
    "ConversationService",
    "ReplyDispatcher",
    "ResponderService",
    "UserService",
]
