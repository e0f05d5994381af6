"""Tests for logging bootstrap and the JSONL sink."""

import io
import json
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from node_resolver.logging_setup import PACKAGE_LOGGER
from node_resolver.logging_setup import JsonlHandler
from node_resolver.logging_setup import init_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def test_jsonl_handler_writes_one_object_per_line(tmp_path):
    path = tmp_path / "logs" / "resolve.jsonl"
    handler = JsonlHandler(path)
    logger = logging.getLogger("node_resolver.tests.jsonl")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    try:
        logger.debug("[resolve] left-pad -> /p/pad.js")
        logger.warning("second", extra={"specifier": "left-pad"})
    finally:
        logger.removeHandler(handler)

    lines = path.read_text().splitlines()
    assert len(lines) == 2
    first, second = (json.loads(line) for line in lines)
    assert first["lvl"] == "DEBUG"
    assert first["message"] == "[resolve] left-pad -> /p/pad.js"
    assert first["schema"]["name"] == "node_resolver.log"
    assert second["specifier"] == "left-pad"


def test_format_record_skips_builtin_attributes(tmp_path):
    record = logging.makeLogRecord({"msg": "hello %s", "args": ("world",), "name": "node_resolver.resolver"})
    payload = JsonlHandler(tmp_path / "unused.jsonl").format_record(record)

    assert payload["message"] == "hello world"
    assert payload["logger"] == "node_resolver.resolver"
    assert "args" not in payload
    assert "msg" not in payload


def test_init_logging_sets_level_and_handlers(tmp_path):
    logger = init_logging("debug", tmp_path / "out.jsonl", console=Console(file=io.StringIO()))

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
    assert sum(isinstance(h, JsonlHandler) for h in logger.handlers) == 1


def test_init_logging_twice_does_not_stack_handlers(tmp_path):
    init_logging("info", tmp_path / "a.jsonl")
    logger = init_logging("warning", tmp_path / "b.jsonl")

    jsonl = [h for h in logger.handlers if isinstance(h, JsonlHandler)]
    assert len(jsonl) == 1
    assert jsonl[0].path == tmp_path / "b.jsonl"
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setattr("node_resolver.logging_setup.DEFAULT_PATH", None)
    logger = init_logging("chatty")

    assert logger.level == logging.WARNING
    assert not any(isinstance(h, JsonlHandler) for h in logger.handlers)
