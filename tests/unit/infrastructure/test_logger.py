# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest

from secid.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
)


@pytest.fixture
def bare_root(monkeypatch: pytest.MonkeyPatch) -> Generator[logging.Logger, None, None]:
    """Root logger stripped of handlers, restored after the test."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _render(msg: str, *, exc_info: object = None, **attrs: object) -> dict:
    record = logging.getLogger("test.logger").makeRecord(
        name="test.logger",
        level=logging.INFO,
        fn="test_logger",
        lno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,  # type: ignore[arg-type]
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return json.loads(_JsonFormatter().format(record))


def test_formatter_emits_stable_keys() -> None:
    payload = _render("hello")

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["ts"].endswith("+00:00")


def test_formatter_merges_extra_and_prefixes_reserved_keys() -> None:
    payload = _render("event", extra={"input": "514000", "message": "shadow", "n": 3})

    assert payload["message"] == "event"
    assert payload["extra_message"] == "shadow"
    assert payload["input"] == "514000"
    assert payload["n"] == 3


def test_formatter_ignores_non_mapping_extra() -> None:
    payload = _render("event", extra="oops")

    assert "extra" not in payload


def test_formatter_reduces_exception_info() -> None:
    try:
        raise ValueError("boom")
    except ValueError as exc:
        payload = _render("failed", exc_info=(type(exc), exc, exc.__traceback__))

    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_formatter_stringifies_unknown_values() -> None:
    payload = _render("event", extra={"path": object()})

    assert isinstance(payload["path"], str)


def test_configure_root_logging_is_idempotent(
    bare_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SECID_LOG_LEVEL", raising=False)
    stream = io.StringIO()

    configure_root_logging(stream=stream)
    configure_root_logging("debug", stream=stream)

    json_handlers = [h for h in bare_root.handlers if isinstance(h.formatter, _JsonFormatter)]
    assert len(json_handlers) == 1
    assert json_handlers[0].stream is stream  # type: ignore[attr-defined]
    assert bare_root.level == logging.DEBUG


def test_configure_root_logging_defaults_to_warning(
    bare_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SECID_LOG_LEVEL", raising=False)

    configure_root_logging(stream=io.StringIO())

    assert bare_root.level == logging.WARNING


def test_secid_log_level_wins_over_generic_variable(
    bare_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("SECID_LOG_LEVEL", "info")

    configure_root_logging(stream=io.StringIO())

    assert bare_root.level == logging.INFO


def test_json_logger_writes_one_object_per_line(bare_root: logging.Logger) -> None:
    stream = io.StringIO()
    configure_root_logging(logging.INFO, stream=stream)

    log = get_json_logger("secid.test")
    log.info("secid.test.event", extra={"extra": {"types": ["isin"]}})
    log.debug("dropped")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["message"] == "secid.test.event"
    assert payload["types"] == ["isin"]
    assert log.propagate is True
