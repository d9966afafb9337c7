"""Tests for the scheduled fire-and-forget trigger."""

import logging
import threading

import requests

from briefing import BriefingSettings
from servers import trigger


class _Response:
    status_code = 200
    text = '{"message": "Research task completed successfully."}'


def test_trigger_returns_before_the_request_completes(monkeypatch):
    release = threading.Event()
    posted = []

    def slow_post(url):
        posted.append(url)
        release.wait(timeout=5)
        return _Response()

    monkeypatch.setattr(trigger.requests, "post", slow_post)

    worker = trigger.trigger_research("http://run.local/api/research-agent")

    # The caller is back while the POST is still in flight.
    assert worker.is_alive()
    release.set()
    worker.join(timeout=5)
    assert posted == ["http://run.local/api/research-agent"]
    assert worker.daemon


def test_request_failure_is_logged_not_raised(monkeypatch, caplog):
    def refused(url):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(trigger.requests, "post", refused)

    with caplog.at_level(logging.INFO, logger="servers.trigger"):
        trigger.trigger_research("http://run.local/api/research-agent").join(timeout=5)

    assert "Successfully triggered the research API." in caplog.text
    assert "Error triggering research API" in caplog.text


def test_scheduler_has_single_cron_job():
    settings = BriefingSettings(
        research_api_url="http://run.local/api/research-agent",
        schedule="30 6 * * 1-5",
    )

    scheduler = trigger.build_scheduler(settings)

    (job,) = scheduler.get_jobs()
    assert job.id == trigger.TRIGGER_JOB_ID
    assert job.func is trigger.trigger_research
    assert job.args == ("http://run.local/api/research-agent",)
    assert "hour='6'" in str(job.trigger)
    assert "minute='30'" in str(job.trigger)
