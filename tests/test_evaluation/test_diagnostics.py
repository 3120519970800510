"""Tests for the diagnostic sink interface and its implementations."""

import logging

import pytest

from rankeval.evaluation.diagnostics import (
    CollectingDiagnosticSink,
    DiagnosticSink,
    LoggingDiagnosticSink,
)


def test_sink_interface_is_abstract() -> None:
    with pytest.raises(TypeError):
        DiagnosticSink()  # type: ignore[abstract]


def test_sink_implementations_share_interface() -> None:
    assert isinstance(LoggingDiagnosticSink(), DiagnosticSink)
    assert isinstance(CollectingDiagnosticSink(), DiagnosticSink)


def test_collecting_sink_records_and_clears() -> None:
    sink = CollectingDiagnosticSink()
    sink.warn("first")
    sink.warn("second")

    assert sink.messages == ["first", "second"]
    assert len(sink) == 2

    sink.clear()
    assert len(sink) == 0


def test_logging_sink_forwards_warning(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingDiagnosticSink(logging.getLogger("rankeval.test"))

    with caplog.at_level(logging.WARNING, logger="rankeval.test"):
        sink.warn("check input data")

    assert [(r.name, r.levelno, r.message) for r in caplog.records] == [
        ("rankeval.test", logging.WARNING, "check input data")
    ]
