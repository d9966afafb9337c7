"""
HTTP entry point that runs one research briefing per request.

It exposes a single route:

  - `POST /api/research-agent` runs the full briefing and answers 200 once
    it completes (even when individual sub-tasks fell back to defaults), or
    500 if an unexpected exception escaped the run.

Run it with:

    python -m servers.run_server

Settings (topics, API key, model) are re-read from the environment on every
request, so edits to `.env` apply to the next scheduled run.
"""

from __future__ import annotations

import asyncio
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Type

from dotenv import load_dotenv
from pydantic import BaseModel

from briefing import BriefingSettings, run_briefing
from briefing.settings import RUN_PATH

logger = logging.getLogger("briefing_run_server")

RunBriefing = Callable[[], Any]


class RunResponse(BaseModel):
    message: str


COMPLETED = RunResponse(message="Research task completed successfully.")
INTERNAL_ERROR = RunResponse(message="Internal Server Error")
METHOD_NOT_ALLOWED = RunResponse(message="Method Not Allowed")


def run_briefing_from_env() -> str:
    load_dotenv()
    settings = BriefingSettings.from_env()
    return asyncio.run(run_briefing(settings))


def make_handler(run: RunBriefing) -> Type[BaseHTTPRequestHandler]:
    class BriefingRunHandler(BaseHTTPRequestHandler):
        server_version = "BriefingRun/0.1"

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A003
            logger.info("%s - - %s", self.address_string(), format % args)

        def _send_json(self, payload: RunResponse, status: int = 200) -> None:
            body = payload.model_dump_json().encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def _on_run_path(self) -> bool:
            if self.path.rstrip("/") != RUN_PATH:
                self.send_error(404, "Not Found")
                return False
            return True

        def do_GET(self) -> None:  # noqa: N802
            if self._on_run_path():
                self._send_json(METHOD_NOT_ALLOWED, status=405)

        def do_POST(self) -> None:  # noqa: N802
            if not self._on_run_path():
                return

            # The trigger sends no body; drain whatever arrived.
            length = int(self.headers.get("Content-Length", "0"))
            if length:
                self.rfile.read(length)

            try:
                run()
            except Exception as exc:
                logger.exception("Error in research agent run: %s", exc)
                self._send_json(INTERNAL_ERROR, status=500)
                return
            self._send_json(COMPLETED)

    return BriefingRunHandler


def build_server(host: str, port: int, run: RunBriefing) -> ThreadingHTTPServer:
    return ThreadingHTTPServer((host, port), make_handler(run))


def run_server(host: str, port: int, run: RunBriefing = run_briefing_from_env) -> None:
    server = build_server(host, port, run)
    logger.info("Briefing run server listening on http://%s:%d%s", host, port, RUN_PATH)
    try:
        server.serve_forever()
    except KeyboardInterrupt:  # pragma: no cover - manual shutdown
        logger.info("Shutting down briefing run server.")
    finally:
        server.server_close()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    load_dotenv()
    settings = BriefingSettings.from_env()
    run_server(settings.host, settings.port)


if __name__ == "__main__":
    main()
