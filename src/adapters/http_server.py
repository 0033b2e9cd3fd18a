"""HTTP adapter exposing the scanner over Flask.

The request body names the log to scan; the response is the same text the
console sink prints. Each request builds its own scanner so nothing is
shared between concurrent requests.
"""

from __future__ import annotations

import logging
from typing import Callable

from flask import Flask, Response, request

from adapters.output_formatting import format_messages
from core.errors import PatternError, ReadError, WriteError
from core.scanner import LogScanner

LOGGER = logging.getLogger(__name__)


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(scanner_factory: Callable[[], LogScanner]) -> Flask:
    """Build the Flask app; ``scanner_factory`` is called once per request."""

    app = Flask(__name__)

    @app.get("/health")
    def health() -> Response:
        return _text("ok")

    @app.post("/process")
    def process_log() -> Response:
        try:
            log_path = request.get_data().decode("utf-8").strip()
        except UnicodeDecodeError:
            return _text("Request body must be UTF-8 text", status=400)
        if not log_path:
            return _text("Request body must contain a log file path", status=400)

        scanner = scanner_factory()
        try:
            result = scanner.scan(log_path)
        except ReadError as exc:
            if exc.path == scanner.undesired_notes_path:
                # The server's own configuration is broken, not the request.
                LOGGER.error("Undesired notes unavailable: %s", exc)
                return _text("Undesired notes are unavailable on the server", status=500)
            return _text(str(exc), status=404)
        except PatternError as exc:
            LOGGER.error("Rejected undesired notes: %s", exc)
            return _text(str(exc), status=422)
        except WriteError as exc:
            return _text(str(exc), status=500)

        return _text(format_messages(list(result.messages), mode="console"))

    return app
