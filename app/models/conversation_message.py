"""ConversationMessage model: one row per user or responder message."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import relationship

from app.db import Base
from app.utils.clock import utcnow


class ConversationMessage(Base):
    """
    Immutable message. author_kind is 'user' or 'responder'; author_id points
    at the users or responders row accordingly.
    """

    __tablename__ = "conversation_messages"

    __table_args__ = (
        Index(
            "ix_conversation_messages_conversation_id_created_at",
            "conversation_id",
            "created_at",
        ),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    conversation_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    )
    author_kind = Column(String(16), nullable=False)  # 'user' | 'responder'
    author_id = Column(Uuid(as_uuid=True), nullable=False)
    content = Column(String(128), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    conversation = relationship("Conversation", back_populates="messages")
