"""
Domain errors raised by services and commands.

Every error carries the HTTP status it maps to; `create_app` renders them as
`{"detail": message}` so routers do not translate them one by one.
"""

from __future__ import annotations


class ChatError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ChatError):
    """Malformed or out-of-bounds input. Client error, never retried."""

    status_code = 422


class NotFoundError(ChatError):
    """A referenced responder or conversation does not exist."""

    status_code = 404


class ConflictError(ChatError):
    """A unique field (e.g. login email) is already taken."""

    status_code = 409


class AuthenticationError(ChatError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class UnsupportedResponderKindError(ChatError):
    """A responder is configured with a kind no strategy handles."""

    status_code = 500


class InvalidUpstreamResponseError(ChatError):
    """The generate endpoint answered, but not with usable reply text."""

    status_code = 502


class UpstreamUnavailableError(ChatError):
    """The generate endpoint could not be reached, timed out or returned an error status."""

    status_code = 503
