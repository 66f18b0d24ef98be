"""User model: the authenticated identity that owns conversations."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """One row per registered account. `name` is the display identity shown on messages."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(320), unique=True, nullable=False, index=True)
    name = Column(String(128), nullable=False)
    password_hash = Column(String(128), nullable=False)

    conversations = relationship(
        "Conversation",
        back_populates="user",
        order_by="Conversation.created_at.desc()",
    )
