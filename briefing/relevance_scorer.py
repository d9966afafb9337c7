"""RelevanceScorer: asks the model how well a piece of content fits the topics."""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from .prompts import relevance_prompt
from .text_generator import TextGenerator, attempt

logger = logging.getLogger(__name__)

DEFAULT_RELEVANCE: int = 5

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_score(text: str) -> Optional[int]:
    """Return the leading integer of the trimmed response, if there is one."""

    match = _LEADING_INT.match(text.strip())
    return int(match.group()) if match else None


class RelevanceScorer:
    """Scores content on a 1-10 scale, falling back to a neutral 5."""

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def assess(self, content: str, topics: Sequence[str]) -> int:
        outcome = await attempt(
            self._generator,
            relevance_prompt(content, topics),
            purpose="assessing relevance",
        )
        if not outcome.ok:
            return DEFAULT_RELEVANCE
        score = parse_score(outcome.text or "")
        if score is None:
            logger.info("Non-numeric relevance response %r; using default score.", outcome.text)
            return DEFAULT_RELEVANCE
        return score
