"""FieldAnalyzer: a free-text overview of the state of the field."""

from __future__ import annotations

from typing import Sequence

from .prompts import field_analysis_prompt
from .text_generator import TextGenerator, attempt

FIELD_ANALYSIS_FALLBACK: str = "Error analyzing field."


class FieldAnalyzer:
    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def analyze(self, topics: Sequence[str]) -> str:
        outcome = await attempt(
            self._generator,
            field_analysis_prompt(topics),
            purpose="analyzing field",
        )
        return outcome.text_or(FIELD_ANALYSIS_FALLBACK)
