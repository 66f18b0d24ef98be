from collections.abc import Generator
from uuid import UUID

import requests
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.auth.security import verify_token
from app.config import get_settings
from app.db import get_db
from app.models.conversation import Conversation
from app.models.user import User
from app.services.conversation_service import ConversationService
from app.services.reply_dispatcher import ReplyDispatcher
from app.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """FastAPI dependency: verify the bearer JWT, then load the user it names."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    payload = verify_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token subject")
    user = UserService(db).get_user(user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Authenticated user not found")
    return user


def get_http_session() -> Generator[requests.Session, None, None]:
    """FastAPI dependency: outbound HTTP session, closed after the request."""
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


def get_reply_dispatcher(
    db: Session = Depends(get_db),
    http_session: requests.Session = Depends(get_http_session),
) -> ReplyDispatcher:
    return ReplyDispatcher(db, http_session, settings=get_settings())


def get_owned_conversation(
    conversation_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Conversation:
    """FastAPI dependency to get a conversation owned by the current user."""
    conversation = ConversationService(db).get_conversation(
        current_user.id, conversation_id
    )
    if conversation is None:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return conversation
