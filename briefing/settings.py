"""Environment-driven settings for the briefing processes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-5-nano"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 6120
RUN_PATH = "/api/research-agent"
DEFAULT_SCHEDULE = "0 7 * * *"

_TRUTHY = {"1", "true", "yes", "on"}


def parse_topics(raw: Optional[str]) -> List[str]:
    """Split a comma-separated topic string; absent or blank yields no topics."""

    if not raw:
        return []
    return [topic.strip() for topic in raw.split(",") if topic.strip()]


@dataclass(slots=True)
class BriefingSettings:
    topics: List[str] = field(default_factory=list)
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model_name: str = DEFAULT_MODEL
    temperature: Optional[float] = None
    concurrent: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    research_api_url: str = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}{RUN_PATH}"
    schedule: str = DEFAULT_SCHEDULE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BriefingSettings":
        env = os.environ if environ is None else environ
        temperature = env.get("BRIEFING_TEMPERATURE")
        host = env.get("BRIEFING_HOST", DEFAULT_HOST)
        port = int(env.get("BRIEFING_PORT", str(DEFAULT_PORT)))
        return cls(
            topics=parse_topics(env.get("RESEARCH_TOPICS")),
            api_key=env.get("OPENAI_API_KEY", ""),
            base_url=env.get("OPENAI_API_BASE_URL", DEFAULT_BASE_URL),
            model_name=env.get("BRIEFING_MODEL", DEFAULT_MODEL),
            temperature=float(temperature) if temperature else None,
            concurrent=env.get("BRIEFING_CONCURRENT", "").strip().lower() in _TRUTHY,
            host=host,
            port=port,
            research_api_url=env.get("RESEARCH_API_URL", f"http://{host}:{port}{RUN_PATH}"),
            schedule=env.get("BRIEFING_CRON", DEFAULT_SCHEDULE),
        )
