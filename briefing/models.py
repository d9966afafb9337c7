"""
Data models shared by the briefing workflow.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ResearchResult:
    """A single paper or tool suggested by the model, plus its relevance score."""

    title: str = ""
    summary: str = ""
    url: str = ""
    relevance: int = 0

    def as_bullet(self) -> str:
        return f"- {self.title}: {self.summary} ({self.url})"
