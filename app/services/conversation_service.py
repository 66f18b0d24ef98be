"""Conversation create/list/get, always scoped to the owning user."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.orm import Session as DBSession

from app.exceptions import NotFoundError
from app.models.conversation import Conversation
from app.services.responder_service import ResponderService


class ConversationService:
    """
    Owner-scoped access to conversations.

    Ownership is part of every lookup predicate: a conversation that belongs
    to someone else is indistinguishable from one that does not exist.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self._responder_svc = ResponderService(db)

    def create_conversation(self, owner_id: UUID, responder_id: UUID) -> Conversation:
        """Open a conversation. Raises NotFoundError for an unknown responder."""
        if self._responder_svc.get_responder(responder_id) is None:
            raise NotFoundError("Responder not found")
        conversation = Conversation(user_id=owner_id, responder_id=responder_id)
        self.db.add(conversation)
        self.db.commit()
        self.db.refresh(conversation)
        return conversation

    def get_conversations_query(self, owner_id: UUID) -> Select:
        """Select for the owner's conversations, newest first (for pagination)."""
        return (
            select(Conversation)
            .where(Conversation.user_id == owner_id)
            .order_by(Conversation.created_at.desc())
        )

    def list_conversations(
        self, owner_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[Conversation]:
        query = self.get_conversations_query(owner_id).offset(skip).limit(limit)
        return list(self.db.scalars(query).all())

    def get_conversation(
        self, owner_id: UUID, conversation_id: UUID
    ) -> Optional[Conversation]:
        return (
            self.db.query(Conversation)
            .filter(
                Conversation.id == conversation_id,
                Conversation.user_id == owner_id,
            )
            .first()
        )
