"""ConversationMessage append and ordered listing."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session as DBSession

from app.constants.responders import MESSAGE_MAX_LENGTH, AuthorKind
from app.exceptions import ValidationError
from app.models.conversation_message import ConversationMessage
from app.utils.clock import as_utc, utcnow
from uuid import UUID


def normalize_content(content: Optional[str]) -> str:
    """Trim and bound-check message text. Raises ValidationError."""
    text = (content or "").strip()
    if not text:
        raise ValidationError("The message cannot be empty")
    if len(text) > MESSAGE_MAX_LENGTH:
        raise ValidationError(
            f"Content is too long (max {MESSAGE_MAX_LENGTH} characters)"
        )
    return text


class ConversationMessageService:
    """Append-only message store. Messages are never updated or deleted here."""

    def __init__(self, db: DBSession) -> None:
        self.db = db

    def append_message(
        self,
        conversation_id: UUID,
        author_kind: AuthorKind,
        author_id: UUID,
        content: str,
        created_at: Optional[datetime] = None,
    ) -> ConversationMessage:
        """
        Persist one message.

        created_at is only accepted for user messages (client send time). It is
        clamped to now when it lies in the future, and to just after the newest
        message of the conversation when it lies before it, so a new message is
        always the latest entry. Responder messages are stamped with the current
        time.
        """
        text = normalize_content(content)
        now = utcnow()
        if created_at is None:
            timestamp = now
        elif author_kind != AuthorKind.USER:
            raise ValidationError("Only user messages may carry a client timestamp")
        else:
            timestamp = min(as_utc(created_at), now)
            latest = self.get_latest_message_time(conversation_id)
            if latest is not None and timestamp <= latest:
                timestamp = latest + timedelta(microseconds=1)
        msg = ConversationMessage(
            conversation_id=conversation_id,
            author_kind=str(author_kind),
            author_id=author_id,
            content=text,
            created_at=timestamp,
        )
        self.db.add(msg)
        self.db.commit()
        self.db.refresh(msg)
        return msg

    def get_messages_query(self, conversation_id: UUID) -> Select:
        """Select for a conversation's messages in ascending time order (for pagination)."""
        return (
            select(ConversationMessage)
            .where(ConversationMessage.conversation_id == conversation_id)
            .order_by(ConversationMessage.created_at)
        )

    def list_messages(
        self,
        conversation_id: UUID,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ConversationMessage]:
        query = self.get_messages_query(conversation_id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return list(self.db.scalars(query).all())

    def get_recent_messages(
        self, conversation_id: UUID, limit: int
    ) -> List[ConversationMessage]:
        """Last `limit` messages, still in ascending order."""
        query = (
            select(ConversationMessage)
            .where(ConversationMessage.conversation_id == conversation_id)
            .order_by(ConversationMessage.created_at.desc())
            .limit(limit)
        )
        return list(reversed(self.db.scalars(query).all()))

    def get_latest_message_time(self, conversation_id: UUID) -> Optional[datetime]:
        latest = self.db.scalar(
            select(func.max(ConversationMessage.created_at)).where(
                ConversationMessage.conversation_id == conversation_id
            )
        )
        return as_utc(latest) if latest is not None else None

    def get_message_count(self, conversation_id: UUID) -> int:
        return self.db.scalar(
            select(func.count())
            .select_from(ConversationMessage)
            .where(ConversationMessage.conversation_id == conversation_id)
        )
