"""Responder kinds and author kinds."""

from enum import StrEnum

MESSAGE_MAX_LENGTH = 128


class ResponderKind(StrEnum):
    """Supported reply generation strategies."""

    NONE = "none"
    HTTP_GENERATE = "http-generate"


class AuthorKind(StrEnum):
    """Who wrote a conversation message."""

    USER = "user"
    RESPONDER = "responder"
