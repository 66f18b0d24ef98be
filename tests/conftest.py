import os

os.environ.setdefault("ENV", "test")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
import requests  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import app.models  # noqa: E402,F401
from app.db import Base, get_db  # noqa: E402
from app.main import create_app  # noqa: E402
from app.routers.utils.dependencies import (  # noqa: E402
    get_current_user,
    get_http_session,
)

pytest_plugins = [
    "tests.fixtures.user_fixtures",
    "tests.fixtures.responder_fixtures",
    "tests.fixtures.conversation_fixtures",
]


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine):
    testing_session = sessionmaker(
        bind=engine, autoflush=False, expire_on_commit=False
    )
    session = testing_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def http_session():
    """Stand-in for the outbound HTTP transport; configure .post per test."""
    return MagicMock(spec=requests.Session)


def _build_app(db, http_session):
    app = create_app(testing=True)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_http_session] = lambda: http_session
    return app


@pytest.fixture
def client(db, http_session, setup_user):
    """Client authenticated as setup_user."""
    app = _build_app(db, http_session)
    app.dependency_overrides[get_current_user] = lambda: setup_user
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(db, http_session):
    """Client with db override only; auth goes through real bearer tokens."""
    app = _build_app(db, http_session)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
