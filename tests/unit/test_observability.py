"""Unit tests for the structured logging helpers in ``observability``."""

from __future__ import annotations

import logging

import pytest

from lib_env_perm import bind_trace_id, get_logger
from lib_env_perm.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should stay silent unless the host application configures it."""

    logger = get_logger()
    assert logger.name == "lib_env_perm"
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Records should carry the bound trace identifier next to the event fields."""

    caplog.set_level(logging.INFO, logger="lib_env_perm")
    bind_trace_id("trace-123")
    try:
        log_info("profile_selected", shell="zsh", path="/home/ada/.zprofile")
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "shell": "zsh", "path": "/home/ada/.zprofile"}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("bash", None) == {"shell": "bash", "path": None}
    assert make_event("bash", "/h/.bashrc", {"role": "shellrc"}) == {
        "shell": "bash",
        "path": "/h/.bashrc",
        "role": "shellrc",
    }
