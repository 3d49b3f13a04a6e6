from __future__ import annotations

from pathlib import Path

import pytest

import numsolve.runtime_logging as runtime_logging


@pytest.fixture
def runtime_log_file(tmp_path, monkeypatch) -> Path:
    log_file = Path(tmp_path) / "runtime_events.jsonl"
    monkeypatch.setattr(runtime_logging, "LOG_DIR", Path(tmp_path))
    monkeypatch.setattr(runtime_logging, "RUNTIME_EVENTS_LOG_FILE", log_file)
    return log_file
