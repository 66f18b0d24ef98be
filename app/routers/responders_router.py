"""Responders API: list the available reply generators."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db import get_db
from app.routers.utils.dependencies import get_current_user
from app.schemas.responder import ResponderRead
from app.services.responder_service import ResponderService

router = APIRouter(prefix="/responders", tags=["responders"])


@router.get("", response_model=list[ResponderRead])
def list_responders(
    _current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[ResponderRead]:
    """Return every configured responder (id, name, kind)."""
    return [ResponderRead.model_validate(r) for r in ResponderService(db).get_responders()]
