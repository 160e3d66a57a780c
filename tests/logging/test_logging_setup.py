"""Tests for structlog setup."""

import json

import structlog

from oxshare.core.logging import setup_logging


def test_json_format_writes_to_stderr(capsys):
    setup_logging("json")
    structlog.get_logger().info("process.complete", chunks=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "process.complete"
    assert record["chunks"] == 3
    assert record["level"] == "info"
    assert "timestamp" in record


def test_plain_format(capsys):
    setup_logging("plain")
    structlog.get_logger().warning("reconstruct.root_check_skipped", manifest="m.ndjson")

    err = capsys.readouterr().err
    assert "reconstruct.root_check_skipped" in err
    assert "manifest=m.ndjson" in err


def test_level_filtering(capsys):
    setup_logging("json", level="warning")
    logger = structlog.get_logger()
    logger.info("hidden")
    logger.error("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_auto_uses_json_in_ci(capsys, monkeypatch):
    monkeypatch.setenv("CI", "true")
    setup_logging("auto")
    structlog.get_logger().info("ci.event")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    assert json.loads(line)["event"] == "ci.event"
