"""
Finder: prompt-driven discovery of papers or tools.

Both finders share one control flow and differ only in prompt wording, so a
single `Finder` class is parameterised with a prompt builder.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from .models import ResearchResult
from .prompts import papers_prompt, tools_prompt
from .relevance_scorer import RelevanceScorer
from .result_parser import parse_results
from .text_generator import TextGenerator, attempt

logger = logging.getLogger(__name__)

PromptBuilder = Callable[[Sequence[str]], str]


class Finder:
    """Generates a list of results for the topics and scores each one."""

    def __init__(
        self,
        *,
        name: str,
        generator: TextGenerator,
        scorer: RelevanceScorer,
        prompt_builder: PromptBuilder,
    ) -> None:
        self.name = name
        self._generator = generator
        self._scorer = scorer
        self._prompt_builder = prompt_builder

    async def find(self, topics: Sequence[str]) -> List[ResearchResult]:
        outcome = await attempt(
            self._generator,
            self._prompt_builder(topics),
            purpose=f"finding {self.name}",
        )
        if not outcome.ok:
            return []

        results = parse_results(outcome.text or "")
        logger.info("Finder '%s' parsed %d results.", self.name, len(results))
        # Scored one at a time, in output order.
        for result in results:
            result.relevance = await self._scorer.assess(result.summary, topics)
        return results


def build_paper_finder(generator: TextGenerator, scorer: RelevanceScorer) -> Finder:
    return Finder(name="papers", generator=generator, scorer=scorer, prompt_builder=papers_prompt)


def build_tool_finder(generator: TextGenerator, scorer: RelevanceScorer) -> Finder:
    return Finder(name="tools", generator=generator, scorer=scorer, prompt_builder=tools_prompt)
