"""
Command to seed the default responders.

Upserts by name so it can be re-run on every deploy:
- default: kind 'none' (canned replies)
- qwen: kind 'http-generate' against the Ollama generate endpoint
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.constants.responders import ResponderKind
from app.infra.logging_config import configure_logging, get_logger
from app.models.responder import Responder
from app.schemas.responder import ResponderCreate
from app.services.responder_service import ResponderService
from app.utils.db.db_session_helper import db_session

logger = get_logger("seed_responders")

OLLAMA_PORT = 11434


def default_responders(settings: Settings) -> List[ResponderCreate]:
    return [
        ResponderCreate(name="default", kind=ResponderKind.NONE),
        ResponderCreate(
            name="qwen",
            kind=ResponderKind.HTTP_GENERATE,
            endpoint_url=f"http://{settings.ollama_host}:{OLLAMA_PORT}/api/generate",
            model_name=settings.responder_default_model,
        ),
    ]


class SeedRespondersCommand:
    def __init__(self, db: Session, settings: Optional[Settings] = None) -> None:
        self.db = db
        self.settings = settings or get_settings()
        self.responder_service = ResponderService(db)

    def execute(self) -> List[Responder]:
        seeded = []
        for data in default_responders(self.settings):
            responder = self.responder_service.upsert_responder(data)
            logger.info(
                "Seeded responder %s (%s) id=%s", responder.name, responder.kind, responder.id
            )
            seeded.append(responder)
        return seeded


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    with db_session() as db:
        SeedRespondersCommand(db, settings).execute()


if __name__ == "__main__":
    main()
