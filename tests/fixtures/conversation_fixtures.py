"""Fixtures for conversation model."""

import pytest

from app.models.conversation import Conversation


def _conversation(db, user, responder) -> Conversation:
    conversation = Conversation(user_id=user.id, responder_id=responder.id)
    db.add(conversation)
    db.commit()
    db.refresh(conversation)
    return conversation


@pytest.fixture(scope="function")
def setup_conversation(db, setup_user, setup_canned_responder):
    """Conversation between setup_user and the canned responder."""
    return _conversation(db, setup_user, setup_canned_responder)


@pytest.fixture(scope="function")
def setup_http_conversation(db, setup_user, setup_http_responder):
    """Conversation between setup_user and the http-generate responder."""
    return _conversation(db, setup_user, setup_http_responder)


@pytest.fixture(scope="function")
def setup_unsupported_conversation(db, setup_user, setup_unsupported_responder):
    return _conversation(db, setup_user, setup_unsupported_responder)
