"""
Command line interface for the AI Research Agent morning briefing.

Loads settings from environment variables (via `.env`), runs one briefing
in-process and logs it. Use `servers.run_server` and `servers.trigger` for the
scheduled deployment.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from briefing import BriefingSettings, run_briefing

# --- Logging configuration ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run a single briefing and report success through the exit code."""
    logger.info("Loading environment variables from .env file...")
    load_dotenv()
    settings = BriefingSettings.from_env()

    if not settings.topics:
        logger.warning("RESEARCH_TOPICS is empty; the briefing will not be topic-specific.")

    try:
        asyncio.run(run_briefing(settings))
    except Exception as exc:
        logger.exception("Error while running the research briefing: %s", exc)
        return 1

    logger.info("Briefing delivered successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
