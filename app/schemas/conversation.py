"""Pydantic schemas for conversations and their messages."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel

from app.schemas.responder import ResponderRead

# -----------------------------------------------------------------------------
# Message schemas
# -----------------------------------------------------------------------------

AuthorKindLiteral = Literal["user", "responder"]


class MessageSubmit(BaseModel):
    """Body of a message submission. Content bounds are checked by the store after trimming."""

    content: str
    created_at: Optional[datetime] = None


class MessageRead(BaseModel):
    """Conversation message for API responses."""

    id: UUID
    conversation_id: UUID
    author_kind: AuthorKindLiteral
    author_id: UUID
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}


# -----------------------------------------------------------------------------
# Conversation schemas
# -----------------------------------------------------------------------------


class ConversationCreate(BaseModel):
    """Schema for opening a conversation with a responder."""

    responder_id: UUID


class ConversationRead(BaseModel):
    """Conversation for API responses."""

    id: UUID
    user_id: UUID
    responder_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}


class ConversationListRow(ConversationRead):
    """Conversation row for list endpoints; optional recent messages and message_count."""

    messages: Optional[list[MessageRead]] = None
    message_count: Optional[int] = None


class ConversationDetail(ConversationRead):
    """Conversation with its responder and every message in order."""

    responder: ResponderRead
    messages: list[MessageRead]
