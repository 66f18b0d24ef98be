"""Reply strategies and the kind -> strategy switch."""

from __future__ import annotations

from typing import Optional

import requests

from app.constants.responders import ResponderKind
from app.exceptions import UnsupportedResponderKindError
from app.models.responder import Responder
from app.responders.base import ReplyStrategy
from app.responders.canned import CannedReplyStrategy
from app.responders.http_generate import TIMEOUT_SECONDS, HttpGenerateStrategy


def build_strategy(
    responder: Responder,
    session: requests.Session,
    timeout: float = TIMEOUT_SECONDS,
    default_model: Optional[str] = None,
) -> ReplyStrategy:
    """Return the strategy for the responder's kind. Unknown kinds are a configuration error."""
    if responder.kind == ResponderKind.NONE:
        return CannedReplyStrategy()
    if responder.kind == ResponderKind.HTTP_GENERATE:
        if not responder.endpoint_url:
            raise UnsupportedResponderKindError(
                f"Responder {responder.name!r} has no endpoint_url"
            )
        return HttpGenerateStrategy(
            endpoint_url=responder.endpoint_url,
            session=session,
            model_name=responder.model_name or default_model,
            timeout=timeout,
        )
    raise UnsupportedResponderKindError(
        f"Unsupported responder kind: {responder.kind!r}"
    )


__all__ = [
    "CannedReplyStrategy",
    "HttpGenerateStrategy",
    "ReplyStrategy",
    "build_strategy",
]
