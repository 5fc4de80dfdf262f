"""Unit tests for environment-driven settings."""

import pytest

from config import _int_env


def test_int_env_default_when_unset(monkeypatch):
    monkeypatch.delenv("SERVER_SELECTION_TIMEOUT_MS", raising=False)

    assert _int_env("SERVER_SELECTION_TIMEOUT_MS", 5000) == 5000


def test_int_env_default_when_blank(monkeypatch):
    monkeypatch.setenv("SERVER_SELECTION_TIMEOUT_MS", "  ")

    assert _int_env("SERVER_SELECTION_TIMEOUT_MS", 5000) == 5000


def test_int_env_parses_value(monkeypatch):
    monkeypatch.setenv("SERVER_SELECTION_TIMEOUT_MS", "250")

    assert _int_env("SERVER_SELECTION_TIMEOUT_MS", 5000) == 250


def test_int_env_names_malformed_setting(monkeypatch):
    monkeypatch.setenv("SERVER_SELECTION_TIMEOUT_MS", "5s")

    with pytest.raises(ValueError, match="SERVER_SELECTION_TIMEOUT_MS must be an integer, got '5s'"):
        _int_env("SERVER_SELECTION_TIMEOUT_MS", 5000)
