"""Parses delimited model output into `ResearchResult` entries."""

from __future__ import annotations

from typing import List

from .models import ResearchResult
from .prompts import FIELD_DELIMITER


def parse_results(text: str) -> List[ResearchResult]:
    """Turn one-item-per-line output into results, tolerating missing fields."""

    results: List[ResearchResult] = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        fields = [part.strip() for part in line.split(FIELD_DELIMITER)[:3]]
        fields += [""] * (3 - len(fields))
        title, summary, url = fields
        results.append(ResearchResult(title=title, summary=summary, url=url, relevance=0))
    return results
