"""
Command to submit a user message and obtain the responder's reply.

Looks up the owned conversation, persists the user message, then hands it to
the ReplyDispatcher. The user message is kept when the reply fails.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from app.constants.responders import AuthorKind
from app.exceptions import NotFoundError
from app.infra.logging_config import get_logger
from app.models.conversation_message import ConversationMessage
from app.models.user import User
from app.schemas.conversation import MessageSubmit
from app.services.conversation_message_service import ConversationMessageService
from app.services.conversation_service import ConversationService
from app.services.reply_dispatcher import ReplyDispatcher

logger = get_logger("submit_message")


class SubmitMessageCommand:
    """Append a user message to a conversation and generate the reply."""

    def __init__(self, db: Session, dispatcher: ReplyDispatcher) -> None:
        self.db = db
        self.dispatcher = dispatcher
        self.conversation_service = ConversationService(db)
        self.message_service = ConversationMessageService(db)

    def execute(
        self, owner: User, conversation_id: UUID, body: MessageSubmit
    ) -> ConversationMessage:
        """
        Submit the message and return the persisted responder reply.

        Args:
            owner: Authenticated user; must own the conversation.
            conversation_id: Target conversation.
            body: Message content and optional client send time.

        Returns:
            ConversationMessage: the responder's reply.

        Raises:
            NotFoundError: conversation absent or owned by someone else.
            ValidationError: content empty or longer than 128 characters.
            ChatError: any dispatcher failure, after the user message is stored.
        """
        conversation = self.conversation_service.get_conversation(
            owner.id, conversation_id
        )
        if conversation is None:
            raise NotFoundError("Conversation not found")

        user_message = self.message_service.append_message(
            conversation_id=conversation.id,
            author_kind=AuthorKind.USER,
            author_id=owner.id,
            content=body.content,
            created_at=body.created_at,
        )
        logger.info(
            "Stored user message %s in conversation %s",
            user_message.id,
            conversation.id,
        )
        return self.dispatcher.generate_reply(conversation, user_message)
