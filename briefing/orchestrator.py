"""
BriefingOrchestrator: sequences the finders, the field analysis and the
summary into one morning briefing and writes it to the log.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Sequence

from .field_analyzer import FieldAnalyzer
from .finder import Finder, build_paper_finder, build_tool_finder
from .models import ResearchResult
from .relevance_scorer import RelevanceScorer
from .settings import BriefingSettings
from .summarizer import Summarizer
from .text_generator import AutoGenTextGenerator, TextGenerator

logger = logging.getLogger(__name__)

TOP_RESULTS: int = 5
BRIEFING_HEADER: str = "========== AI Research Agent Morning Briefing =========="
BRIEFING_FOOTER: str = "=" * 54


def rank_results(results: Iterable[ResearchResult], limit: int = TOP_RESULTS) -> List[ResearchResult]:
    """Highest relevance first; ties keep their original order."""

    return sorted(results, key=lambda result: result.relevance, reverse=True)[:limit]


class BriefingOrchestrator:
    """Runs one briefing: find, analyze, rank, summarize, log."""

    def __init__(
        self,
        *,
        paper_finder: Finder,
        tool_finder: Finder,
        field_analyzer: FieldAnalyzer,
        summarizer: Summarizer,
        concurrent: bool = False,
    ) -> None:
        self._paper_finder = paper_finder
        self._tool_finder = tool_finder
        self._field_analyzer = field_analyzer
        self._summarizer = summarizer
        self._concurrent = concurrent

    @classmethod
    def from_generator(cls, generator: TextGenerator, *, concurrent: bool = False) -> "BriefingOrchestrator":
        scorer = RelevanceScorer(generator)
        return cls(
            paper_finder=build_paper_finder(generator, scorer),
            tool_finder=build_tool_finder(generator, scorer),
            field_analyzer=FieldAnalyzer(generator),
            summarizer=Summarizer(generator),
            concurrent=concurrent,
        )

    async def run(self, topics: Sequence[str]) -> str:
        topics = list(topics)
        logger.info("Offloaded AI research task started for topics: %s", topics)

        if self._concurrent:
            papers, field_analysis, tools = await asyncio.gather(
                self._paper_finder.find(topics),
                self._field_analyzer.analyze(topics),
                self._tool_finder.find(topics),
            )
        else:
            papers = await self._paper_finder.find(topics)
            field_analysis = await self._field_analyzer.analyze(topics)
            tools = await self._tool_finder.find(topics)

        top_papers = rank_results(papers)
        top_tools = rank_results(tools)
        logger.info(
            "Ranked %d of %d papers and %d of %d tools.",
            len(top_papers),
            len(papers),
            len(top_tools),
            len(tools),
        )

        briefing = await self._summarizer.summarize(top_papers, field_analysis, top_tools)
        self._emit(briefing)
        return briefing

    @staticmethod
    def _emit(briefing: str) -> None:
        logger.info("\n%s\n\n%s\n\n%s\n", BRIEFING_HEADER, briefing, BRIEFING_FOOTER)


async def run_briefing(settings: BriefingSettings) -> str:
    """Build the production generator from settings and run one briefing."""

    generator = AutoGenTextGenerator(
        api_key=settings.api_key,
        openai_model_name=settings.model_name,
        base_url=settings.base_url,
        temperature=settings.temperature,
    )
    try:
        orchestrator = BriefingOrchestrator.from_generator(generator, concurrent=settings.concurrent)
        return await orchestrator.run(settings.topics)
    finally:
        await generator.close()
