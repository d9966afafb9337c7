"""Summarizer: folds the ranked findings into the final briefing text."""

from __future__ import annotations

from typing import Sequence

from .models import ResearchResult
from .prompts import summary_prompt
from .text_generator import TextGenerator, attempt

SUMMARY_FALLBACK: str = "Error generating summary."


class Summarizer:
    """Builds the composite briefing prompt and returns the model's summary."""

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def summarize(
        self,
        papers: Sequence[ResearchResult],
        field_analysis: str,
        tools: Sequence[ResearchResult],
    ) -> str:
        outcome = await attempt(
            self._generator,
            summary_prompt(papers, field_analysis, tools),
            purpose="summarizing content",
        )
        return outcome.text_or(SUMMARY_FALLBACK)
