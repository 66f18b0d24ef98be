"""
ReplyDispatcher: produce and persist the responder's answer to a user message.

The user message is already committed when the dispatcher runs. Every failure
is terminal for the request: no retry, no fallback to another kind, and no
responder message is written unless the strategy produced valid text.
"""

from __future__ import annotations

from typing import Optional

import requests
from sqlalchemy.orm import Session as DBSession

from app.config import Settings, get_settings
from app.constants.responders import AuthorKind
from app.exceptions import (
    ChatError,
    InvalidUpstreamResponseError,
    NotFoundError,
    ValidationError,
)
from app.infra.logging_config import get_logger
from app.models.conversation import Conversation
from app.models.conversation_message import ConversationMessage
from app.responders import build_strategy
from app.services.conversation_message_service import (
    ConversationMessageService,
    normalize_content,
)
from app.services.responder_service import ResponderService

logger = get_logger("reply_dispatcher")


class ReplyDispatcher:
    def __init__(
        self,
        db: DBSession,
        http_session: requests.Session,
        settings: Optional[Settings] = None,
    ) -> None:
        self.db = db
        self._http_session = http_session
        self._settings = settings or get_settings()
        self._responder_svc = ResponderService(db)
        self._message_svc = ConversationMessageService(db)

    def generate_reply(
        self,
        conversation: Conversation,
        user_message: ConversationMessage,
    ) -> ConversationMessage:
        """
        Generate, validate and persist exactly one responder message.

        Raises:
            NotFoundError: the conversation's responder no longer exists.
            UnsupportedResponderKindError: the responder's kind has no strategy.
            UpstreamUnavailableError: the generate endpoint could not be used.
            InvalidUpstreamResponseError: the endpoint's text is empty or too long.
        """
        responder = self._responder_svc.get_responder(conversation.responder_id)
        if responder is None:
            raise NotFoundError("Responder not found")

        strategy = build_strategy(
            responder,
            session=self._http_session,
            timeout=self._settings.responder_timeout_seconds,
            default_model=self._settings.responder_default_model,
        )
        logger.info(
            "Dispatching conversation %s to responder %s (%s)",
            conversation.id,
            responder.name,
            responder.kind,
        )
        try:
            raw = strategy.generate(user_message.content)
            text = normalize_content(raw)
        except ValidationError as e:
            logger.warning(
                "Responder %s produced unusable text: %s", responder.name, e.message
            )
            raise InvalidUpstreamResponseError(
                f"Responder returned an invalid reply: {e.message}"
            ) from e
        except ChatError as e:
            logger.warning("Responder %s failed: %s", responder.name, e.message)
            raise

        return self._message_svc.append_message(
            conversation_id=conversation.id,
            author_kind=AuthorKind.RESPONDER,
            author_id=responder.id,
            content=text,
        )
