"""Responder lookups and the seeding upsert."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session as DBSession

from app.models.responder import Responder
from app.schemas.responder import ResponderCreate


class ResponderService:
    def __init__(self, db: DBSession) -> None:
        self.db = db

    def get_responder(self, responder_id: UUID) -> Optional[Responder]:
        return self.db.query(Responder).filter(Responder.id == responder_id).first()

    def get_responder_by_name(self, name: str) -> Optional[Responder]:
        return self.db.query(Responder).filter(Responder.name == name).first()

    def get_responders(self) -> List[Responder]:
        return self.db.query(Responder).order_by(Responder.name).all()

    def upsert_responder(self, data: ResponderCreate) -> Responder:
        """Create the responder or overwrite its kind/endpoint/model, keyed by name."""
        responder = self.get_responder_by_name(data.name)
        if responder is None:
            responder = Responder(**data.model_dump())
            self.db.add(responder)
        else:
            responder.kind = data.kind
            responder.endpoint_url = data.endpoint_url
            responder.model_name = data.model_name
        self.db.commit()
        self.db.refresh(responder)
        return responder
