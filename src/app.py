"""Application entry point for log-scanner."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings
from adapters.console_sink import ConsoleSink
from adapters.file_source import FileTextSource
from adapters.http_server import create_app
from adapters.report_sink import ReportFileSink
from core.config import ScanConfig
from core.errors import PatternError, ReadError, WriteError
from core.scanner import LogScanner

NAME = "LOG SCANNER"
FONT = "tarty-1"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _log_file_handler(file_cfg: dict) -> RotatingFileHandler:
    """Rotating file handler; relative paths land under the project root."""

    path = file_cfg.get("path", "logs/log_scanner.log")
    if not os.path.isabs(path):
        path = os.path.join(settings.PROJECT_ROOT, path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 5)),
        encoding="utf-8",
    )


def _build_log_handlers(config: dict) -> list[logging.Handler]:
    """Create the handlers enabled by the ``logging`` config section."""

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        # Matched lines own stdout; log records go to stderr.
        handlers.append(logging.StreamHandler(sys.stderr))
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_log_file_handler(file_cfg))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    handlers = _build_log_handlers(config)
    if handlers:
        logging.basicConfig(level=level, handlers=handlers)


def build_scanner(console: bool = True) -> LogScanner:
    """Wire the file adapters into a fresh scanner."""

    sinks = [ReportFileSink(settings.OUTPUT_DIR, encoding=settings.ENCODING)]
    if console:
        sinks.insert(0, ConsoleSink())
    return LogScanner(
        source=FileTextSource(encoding=settings.ENCODING),
        sinks=sinks,
        config=ScanConfig(undesired_notes_path=settings.UNDESIRED_NOTES_PATH),
    )


def _run_cli(log_path: str) -> int:
    logger = logging.getLogger(__name__)
    try:
        build_scanner().scan(log_path)
    except PatternError as exc:
        logger.error("Fix the undesired notes in %s: %s", settings.UNDESIRED_NOTES_PATH, exc)
        return 2
    except (ReadError, WriteError) as exc:
        logger.error("Scan aborted: %s", exc)
        return 1
    return 0


def _run_server(host: str, port: int) -> None:
    logger = logging.getLogger(__name__)
    app = create_app(lambda: build_scanner(console=False))
    logger.info("Listening on %s:%s", host, port)
    app.run(host=host, port=port)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="log-scanner")
    subparsers = parser.add_subparsers(dest="command")

    cli_parser = subparsers.add_parser("cli", help="Scan a single log file")
    cli_parser.add_argument("log", help="Path to the log file")

    server_parser = subparsers.add_parser("server", help="Start the HTTP server")
    server_parser.add_argument("--host", default=settings.SERVER_HOST)
    server_parser.add_argument("--port", type=int, default=settings.SERVER_PORT)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    _print_banner()
    _configure_logging()

    if args.command == "cli":
        return _run_cli(args.log)
    _run_server(args.host, args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
