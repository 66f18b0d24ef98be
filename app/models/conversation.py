"""Conversation model: one thread between a user and a responder."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import TimestampMixin


class Conversation(Base, TimestampMixin):
    """Owner and responder are fixed at creation; rows are never mutated."""

    __tablename__ = "conversations"

    __table_args__ = (
        Index("ix_conversations_user_id_created_at", "user_id", "created_at"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    responder_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("responders.id", ondelete="RESTRICT"),
        nullable=False,
    )

    user = relationship("User", back_populates="conversations")
    responder = relationship("Responder")
    messages = relationship(
        "ConversationMessage",
        back_populates="conversation",
        cascade="all, delete-orphan",
        order_by="ConversationMessage.created_at",
    )
