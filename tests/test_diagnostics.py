import logging

import pytest

from prismview.core.diagnostics import (
    DiagnosticEmitter,
    LoggingEmitter,
    NullEmitter,
    RecordingEmitter,
    format_event_message,
)


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)
    assert isinstance(RecordingEmitter(), DiagnosticEmitter)


def test_null_emitter_ignores_everything() -> None:
    emitter = NullEmitter()

    emitter.warning("warning")
    emitter.error("error", RuntimeError("boom"))
    emitter.event("page_written", {"path": "out.html"})


def test_recording_emitter_collects_diagnostics() -> None:
    emitter = RecordingEmitter()

    assert not emitter.has_errors
    emitter.warning("careful")
    emitter.error("broken")
    emitter.event("page_written", {"path": "out.html"})

    assert emitter.has_errors
    assert emitter.warnings == ["careful"]
    assert emitter.errors == ["broken"]
    assert emitter.events == [("page_written", {"path": "out.html"})]


def test_logging_emitter_forwards_records(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(logger_obj=logging.getLogger("prismview.tests"))

    with caplog.at_level(logging.DEBUG, logger="prismview.tests"):
        emitter.warning("careful")
        emitter.error("broken", ValueError("cause"))
        emitter.event("page_written", {"path": "out.html"})
        emitter.event("custom", {"value": 1})

    levels = [(record.levelname, record.getMessage()) for record in caplog.records]
    assert levels[:3] == [
        ("WARNING", "careful"),
        ("ERROR", "broken"),
        ("INFO", "Wrote out.html"),
    ]
    assert levels[3][0] == "DEBUG"
    assert "custom" in levels[3][1]
    assert caplog.records[1].exc_info is not None


@pytest.mark.parametrize(
    ("name", "payload", "expected"),
    [
        ("page_written", {"path": "page.html"}, "Wrote page.html"),
        ("page_written", {}, "Wrote <stdout>"),
        (
            "directories_permitted",
            {"count": 2, "requested": 3},
            "Permitted 2 of 3 requested source directories",
        ),
        ("unknown", {"value": 1}, None),
    ],
)
def test_format_event_message(name: str, payload: dict, expected: str | None) -> None:
    assert format_event_message(name, payload) == expected
