from __future__ import annotations

from typing import List

from adapters.http_server import create_app
from core.config import ScanConfig
from core.errors import ReadError, WriteError
from core.scanner import LogScanner

NOTES_PATH = "notes.txt"


class FakeSource:
    def __init__(self, files: dict[str, str]) -> None:
        self.files = files

    def read(self, name: str) -> str:
        if name not in self.files:
            raise ReadError(name, "missing")
        return self.files[name]


class FailingSink:
    def deliver(self, log_name: str, messages: List[str]) -> None:
        raise WriteError(f"output/{log_name} messages.txt", "read-only")


def _client(files: dict[str, str], sinks=()):
    def factory() -> LogScanner:
        return LogScanner(
            source=FakeSource(files),
            sinks=list(sinks),
            config=ScanConfig(undesired_notes_path=NOTES_PATH),
        )

    return create_app(factory).test_client()


def test_process_returns_matched_lines() -> None:
    client = _client({NOTES_PATH: "NOTE: <X>", "app.log": "WARNING: a\nb\nNOTE: c"})

    response = client.post("/process", data=b"app.log")

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert response.get_data(as_text=True) == "WARNING: a\nNOTE: c"


def test_process_without_issues_returns_notice() -> None:
    client = _client({NOTES_PATH: "", "app.log": "fine"})

    response = client.post("/process", data=b"app.log\n")

    assert response.get_data(as_text=True) == "No issues were detected in the log file."


def test_process_missing_log_is_not_found() -> None:
    client = _client({NOTES_PATH: ""})

    response = client.post("/process", data=b"missing.log")

    assert response.status_code == 404
    assert "missing.log" in response.get_data(as_text=True)


def test_process_bad_pattern_is_unprocessable() -> None:
    client = _client({NOTES_PATH: "<X>", "app.log": "ERROR: x"})

    response = client.post("/process", data=b"app.log")

    assert response.status_code == 422
    assert "line 1" in response.get_data(as_text=True)


def test_process_write_failure_is_server_error() -> None:
    client = _client({NOTES_PATH: "", "app.log": "ERROR: x"}, sinks=[FailingSink()])

    response = client.post("/process", data=b"app.log")

    assert response.status_code == 500


def test_process_rejects_empty_or_binary_body() -> None:
    client = _client({NOTES_PATH: ""})

    assert client.post("/process", data=b"").status_code == 400
    assert client.post("/process", data=b"\xff\xfe").status_code == 400


def test_health() -> None:
    client = _client({})
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "ok"


def test_process_missing_undesired_notes_is_server_error() -> None:
    client = _client({"app.log": "ERROR: x"})

    response = client.post("/process", data=b"app.log")

    assert response.status_code == 500
    assert NOTES_PATH not in response.get_data(as_text=True)
