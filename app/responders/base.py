"""
Reply strategy interface.

A strategy turns the text of a user message into reply text. It does not
touch the database; persisting the reply is the dispatcher's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReplyStrategy(ABC):
    """Contract for reply generation. One implementation per responder kind."""

    @abstractmethod
    def generate(self, content: str) -> str:
        """Return reply text for `content`. Raise a ChatError subclass on failure."""
        ...
