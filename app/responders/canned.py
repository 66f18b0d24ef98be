"""Local strategy for responders of kind 'none'."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from app.constants.canned_replies import CannedReplies
from app.responders.base import ReplyStrategy


class CannedReplyStrategy(ReplyStrategy):
    """Pick one reply uniformly at random from a fixed catalog. No I/O."""

    def __init__(
        self,
        catalog: Sequence[str] = CannedReplies.CATALOG,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not catalog:
            raise ValueError("Canned reply catalog must not be empty")
        self._catalog = tuple(catalog)
        self._rng = rng or random.Random()

    @property
    def catalog(self) -> tuple[str, ...]:
        return self._catalog

    def generate(self, content: str) -> str:
        return self._rng.choice(self._catalog)
