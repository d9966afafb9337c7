"""
Scheduled trigger for the research briefing.

On every tick of the cron schedule the trigger POSTs to the run endpoint
(`RESEARCH_API_URL`) and moves on without waiting for the response; the run
itself reports its outcome through the run server's logs.

Usage:
    python -m servers.trigger           # run the scheduler daemon
    python -m servers.trigger --once    # fire a single trigger and exit
"""

from __future__ import annotations

import argparse
import logging
import threading

import requests
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger
from dotenv import load_dotenv

from briefing import BriefingSettings

logger = logging.getLogger(__name__)

TRIGGER_JOB_ID = "research_briefing_trigger"


def _post(url: str) -> None:
    try:
        response = requests.post(url)
    except requests.RequestException as exc:
        logger.error("Error triggering research API: %s", exc)
        return
    logger.info("Research API answered %s: %s", response.status_code, response.text)


def trigger_research(url: str) -> threading.Thread:
    """Start the POST on a daemon thread and return without awaiting it."""

    logger.info("Triggering research task at: %s", url)
    worker = threading.Thread(target=_post, args=(url,), name="research-trigger", daemon=True)
    worker.start()
    logger.info("Successfully triggered the research API.")
    return worker


def build_scheduler(settings: BriefingSettings) -> BlockingScheduler:
    scheduler = BlockingScheduler()
    scheduler.add_job(
        trigger_research,
        CronTrigger.from_crontab(settings.schedule),
        args=[settings.research_api_url],
        id=TRIGGER_JOB_ID,
        name="Research briefing trigger",
        replace_existing=True,
    )
    return scheduler


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    parser = argparse.ArgumentParser(description="Trigger the research briefing on a schedule.")
    parser.add_argument("--once", action="store_true", help="fire one trigger and exit")
    args = parser.parse_args()

    load_dotenv()
    settings = BriefingSettings.from_env()

    if args.once:
        # Give the request time to leave the process before it exits.
        trigger_research(settings.research_api_url).join(timeout=5)
        return

    scheduler = build_scheduler(settings)
    logger.info("Scheduler started with cron '%s' - Press Ctrl+C to stop", settings.schedule)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
