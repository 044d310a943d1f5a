"""Tests for first_valid, path-list manipulation and timing wrappers."""
from __future__ import annotations

import logging
import os

import pytest

from script_helpers.coalesce import first_valid
from script_helpers.envpath import add_path_entry, path_entries, remove_path_entry
from script_helpers.timing import log_complete, log_start, timed

logger = logging.getLogger("tests.timing")


def test_first_valid_skips_none_and_blank() -> None:
    assert first_valid(None, "", "  ", "value", "other") == "value"
    assert first_valid(0, 1) == 0


def test_first_valid_default_and_predicate() -> None:
    assert first_valid(None, "", default="fallback") == "fallback"
    assert first_valid(1, 5, 8, predicate=lambda v: v > 4) == 5


def _env(*entries: str) -> dict:
    return {"PATH": os.pathsep.join(entries)}


def test_path_entries_ignores_empty_segments() -> None:
    env = {"PATH": os.pathsep.join(["/a", "", "/b"])}
    assert path_entries(environ=env) == ["/a", "/b"]
    assert path_entries("MISSING", environ=env) == []


def test_add_path_entry_appends_and_prepends() -> None:
    env = _env("/a")
    assert add_path_entry("/b", environ=env) == ["/a", "/b"]
    assert add_path_entry("/c", prepend=True, environ=env) == ["/c", "/a", "/b"]
    assert env["PATH"] == os.pathsep.join(["/c", "/a", "/b"])


def test_add_path_entry_does_not_duplicate() -> None:
    env = _env("/a", "/b")
    assert add_path_entry("/b/", environ=env) == ["/a", "/b"]
    assert env["PATH"] == os.pathsep.join(["/a", "/b"])


def test_add_path_entry_to_custom_variable() -> None:
    env: dict = {}
    assert add_path_entry("/mods", variable="PSModulePath", environ=env) == ["/mods"]
    assert env == {"PSModulePath": "/mods"}


def test_remove_path_entry() -> None:
    env = _env("/a", "/b", "/a")
    assert remove_path_entry("/a", environ=env) == ["/b"]
    assert env["PATH"] == "/b"


def test_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCATOR_TEST_PATH", "/x")
    add_path_entry("/y", variable="LOCATOR_TEST_PATH")
    assert os.environ["LOCATOR_TEST_PATH"] == os.pathsep.join(["/x", "/y"])


def test_log_start_and_complete(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="tests.timing"):
        started = log_start(logger, "indexing")
        elapsed = log_complete(logger, "indexing", started)

    assert elapsed >= 0
    assert [r.getMessage().split(" in ")[0] for r in caplog.records] == [
        "Starting indexing",
        "Completed indexing",
    ]


def test_timed_logs_failure_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="tests.timing"):
        with pytest.raises(RuntimeError):
            with timed(logger, "broken step"):
                raise RuntimeError("boom")

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Starting broken step"
    assert messages[1].startswith("Failed broken step after ")
    assert caplog.records[1].levelno == logging.ERROR
    assert not any(m.startswith("Completed") for m in messages)


def test_timed_success(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="tests.timing"):
        with timed(logger, "quick step"):
            pass
    assert caplog.records[-1].getMessage().startswith("Completed quick step in ")
