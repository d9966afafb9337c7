"""Shared fixtures: a scripted stand-in for the language model."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest

PAPERS = "Find 5 recent"
TOOLS = "Find 5 new"
FIELD = "Provide a summary of the current state"
RELEVANCE = "As an AI Engineer, on a scale"
SUMMARY = "You are an AI research assistant. Here is"

Reply = Union[str, BaseException]


class ScriptedGenerator:
    """Answers prompts by their leading text; lists are consumed one reply per call."""

    def __init__(self, replies: Optional[Dict[str, Union[Reply, List[Reply]]]] = None) -> None:
        self.replies = dict(replies or {})
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        for prefix, reply in self.replies.items():
            if not prompt.startswith(prefix):
                continue
            if isinstance(reply, list):
                reply = reply.pop(0)
            if isinstance(reply, BaseException):
                raise reply
            return reply
        raise RuntimeError(f"No scripted reply for prompt: {prompt[:40]}")

    def prompts_starting_with(self, prefix: str) -> List[str]:
        return [prompt for prompt in self.prompts if prompt.startswith(prefix)]


@pytest.fixture
def failing_generator() -> ScriptedGenerator:
    """Every call fails, as if the API were unreachable."""
    return ScriptedGenerator()
