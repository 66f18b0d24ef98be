"""Responder model: a configured reply generator (canned or remote generate endpoint)."""

from __future__ import annotations

import uuid

from sqlalchemy import Column, String, Uuid

from app.db import Base
from app.models.mixins import TimestampMixin


class Responder(Base, TimestampMixin):
    """
    One row per reply generator. Seeded by an administrative command and not
    modified afterwards.

    kind is 'none' (canned replies, endpoint_url is NULL) or 'http-generate'
    (endpoint_url is the absolute URL of the generate endpoint).
    """

    __tablename__ = "responders"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(64), unique=True, nullable=False, index=True)
    kind = Column(String(32), nullable=False)
    endpoint_url = Column(String(2048), nullable=True)
    model_name = Column(String(128), nullable=True)
