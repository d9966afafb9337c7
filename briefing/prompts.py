"""
Centralized prompts used by the briefing collaborators.
"""

from __future__ import annotations

from typing import Sequence

from .models import ResearchResult

FIELD_DELIMITER: str = "|||"

BRIEFING_SYSTEM_PROMPT: str = (
    "You are an AI research assistant supporting an AI Engineer. "
    "Follow the formatting instructions in each request exactly and do not add commentary."
)


def join_topics(topics: Sequence[str]) -> str:
    return ", ".join(topics)


def papers_prompt(topics: Sequence[str]) -> str:
    """Return the prompt asking for five research papers, one per line."""

    return (
        f"Find 5 recent and important research papers on the topics: {join_topics(topics)}. "
        f"For each paper, provide title, summary, and URL, separated by '{FIELD_DELIMITER}'. "
        "Each paper should be on a new line."
    )


def tools_prompt(topics: Sequence[str]) -> str:
    """Return the prompt asking for five AI tools, one per line."""

    return (
        f"Find 5 new and interesting AI tools relevant to an AI Engineer working on: {join_topics(topics)}. "
        f"For each tool, provide name, description, and URL, separated by '{FIELD_DELIMITER}'. "
        "Each tool should be on a new line."
    )


def field_analysis_prompt(topics: Sequence[str]) -> str:
    return (
        f"Provide a summary of the current state of the field in these topics: {join_topics(topics)}. "
        "Include new techniques, methods, and frameworks."
    )


def relevance_prompt(content: str, topics: Sequence[str]) -> str:
    return (
        f"As an AI Engineer, on a scale of 1-10, how relevant is the following content to my work on "
        f"{join_topics(topics)}? Respond with only a number. Content: {content}"
    )


def summary_prompt(
    papers: Sequence[ResearchResult],
    field_analysis: str,
    tools: Sequence[ResearchResult],
) -> str:
    """Return the composite morning-briefing prompt."""

    paper_lines = "\n".join(paper.as_bullet() for paper in papers)
    tool_lines = "\n".join(tool.as_bullet() for tool in tools)
    return (
        "You are an AI research assistant. Here is your morning briefing for an AI Engineer.\n\n"
        f"**Top 5 Research Papers:**\n{paper_lines}\n\n"
        f"**Field Analysis:**\n{field_analysis}\n\n"
        f"**Top 5 New AI Tools:**\n{tool_lines}\n\n"
        "Please provide a concise summary of this information."
    )
