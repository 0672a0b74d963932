"""Tests for environment settings and logging setup at startup."""

import importlib
import logging

import pytest
from fastapi.testclient import TestClient

from goalsheet import config
import goalsheet.main
from goalsheet.__main__ import _build_parser


@pytest.fixture
def lowercase_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    yield importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_log_level_is_upper_cased(lowercase_log_level):
    assert lowercase_log_level.LOG_LEVEL == "DEBUG"


def test_app_starts_with_lowercase_log_level(lowercase_log_level, monkeypatch):
    monkeypatch.setattr(goalsheet.main, "LOG_LEVEL", lowercase_log_level.LOG_LEVEL)
    # basicConfig only applies the level when the root logger has no handlers
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    with TestClient(goalsheet.main.app) as client:
        assert client.get("/health").text == "OK"
    assert root.level == logging.DEBUG


def test_cli_log_level_accepts_any_case():
    args = _build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_cli_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["--log-level", "loud"])
