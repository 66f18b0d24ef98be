"""Conversations API: create, list, detail, messages and message submission."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi_pagination import Page, Params
from fastapi_pagination.ext.sqlalchemy import paginate
from sqlalchemy.orm import Session

from app.commands.submit_message_command import SubmitMessageCommand
from app.db import get_db
from app.models.conversation import Conversation
from app.models.user import User
from app.routers.utils.dependencies import (
    get_current_user,
    get_owned_conversation,
    get_reply_dispatcher,
)
from app.schemas.conversation import (
    ConversationCreate,
    ConversationDetail,
    ConversationListRow,
    ConversationRead,
    MessageRead,
    MessageSubmit,
)
from app.schemas.responder import ResponderRead
from app.services.conversation_message_service import ConversationMessageService
from app.services.conversation_service import ConversationService
from app.services.reply_dispatcher import ReplyDispatcher

conversations_router = APIRouter(prefix="/conversations", tags=["Conversation"])


def _conversation_to_list_row(
    c: Conversation, msg_svc: ConversationMessageService, message_limit: int
) -> ConversationListRow:
    """Convert conversation to ConversationListRow."""
    payload = ConversationRead.model_validate(c).model_dump()
    if message_limit > 0:
        recent = msg_svc.get_recent_messages(c.id, message_limit)
        payload["messages"] = [MessageRead.model_validate(m) for m in recent]
        payload["message_count"] = msg_svc.get_message_count(c.id)
    return ConversationListRow(**payload)


@conversations_router.post("", response_model=ConversationRead, status_code=201)
def create_conversation(
    data: ConversationCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ConversationRead:
    """Open a conversation with a responder."""
    conversation = ConversationService(db).create_conversation(
        current_user.id, data.responder_id
    )
    return ConversationRead.model_validate(conversation)


@conversations_router.get("", response_model=Page[ConversationListRow])
def list_conversations(
    params: Params = Depends(),
    message_limit: int = Query(0, ge=0, le=50),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Page[ConversationListRow]:
    """List the caller's conversations, newest first, with the last N messages each."""
    svc = ConversationService(db)
    msg_svc = ConversationMessageService(db)
    return paginate(
        db,
        svc.get_conversations_query(current_user.id),
        params=params,
        transformer=lambda items: [
            _conversation_to_list_row(c, msg_svc, message_limit) for c in items
        ],
    )


@conversations_router.get("/{conversation_id}", response_model=ConversationDetail)
def get_conversation(
    conversation: Conversation = Depends(get_owned_conversation),
    db: Session = Depends(get_db),
) -> ConversationDetail:
    """Get a conversation with its messages in order."""
    messages = ConversationMessageService(db).list_messages(conversation.id)
    return ConversationDetail(
        **ConversationRead.model_validate(conversation).model_dump(),
        responder=ResponderRead.model_validate(conversation.responder),
        messages=[MessageRead.model_validate(m) for m in messages],
    )


@conversations_router.get(
    "/{conversation_id}/messages", response_model=Page[MessageRead]
)
def list_conversation_messages(
    params: Params = Depends(),
    conversation: Conversation = Depends(get_owned_conversation),
    db: Session = Depends(get_db),
) -> Page[MessageRead]:
    """List messages for a conversation with pagination."""
    msg_svc = ConversationMessageService(db)
    return paginate(
        db,
        msg_svc.get_messages_query(conversation.id),
        params=params,
        transformer=lambda items: [MessageRead.model_validate(m) for m in items],
    )


@conversations_router.post(
    "/{conversation_id}/messages", response_model=MessageRead, status_code=201
)
def submit_message(
    conversation_id: UUID,
    body: MessageSubmit,
    current_user: User = Depends(get_current_user),
    dispatcher: ReplyDispatcher = Depends(get_reply_dispatcher),
    db: Session = Depends(get_db),
) -> MessageRead:
    """Submit a user message; returns the responder's reply. 404 when not owned."""
    command = SubmitMessageCommand(db, dispatcher)
    reply = command.execute(current_user, conversation_id, body)
    return MessageRead.model_validate(reply)
