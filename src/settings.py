"""Static configuration for log-scanner.

All user-editable settings (input/output locations, server binding, logging)
live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")


def _config_path() -> str:
    """Return the config file path, honouring LOG_SCANNER_CONFIG from .env."""

    load_dotenv()
    return os.getenv("LOG_SCANNER_CONFIG", DEFAULT_CONFIG_PATH)


CONFIG_PATH = _config_path()


def _load_json_config(path: str) -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    """Resolve relative paths against the project root."""

    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config(CONFIG_PATH)

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Undesired notes hold one pattern per line; "<X>" is the wildcard token.
_scan = _CONFIG.get("scan", {})
UNDESIRED_NOTES_PATH = _resolve_path(_scan.get("undesired_notes_path", "input/undesired_notes.txt"))
# Reports are written as "<log file name> messages.txt" inside this folder.
OUTPUT_DIR = _resolve_path(_scan.get("output_dir", "output"))
ENCODING = _scan.get("encoding", "utf-8")

# HTTP server binding used by the "server" command.
_server = _CONFIG.get("server", {})
SERVER_HOST = _server.get("host", "0.0.0.0")
SERVER_PORT = int(_server.get("port", 8080))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
