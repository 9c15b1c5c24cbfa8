"""Unit tests for environment parsing helpers."""

from __future__ import annotations

import pytest

from seqclass.helpers.env import env_int, env_optional_int, env_str


def test_env_str_treats_blank_as_unset(monkeypatch) -> None:
    monkeypatch.setenv("SEQCLASS_TEST_STR", "   ")
    assert env_str("SEQCLASS_TEST_STR", "fallback") == "fallback"

    monkeypatch.setenv("SEQCLASS_TEST_STR", " /models/toxic ")
    assert env_str("SEQCLASS_TEST_STR") == "/models/toxic"


def test_env_int(monkeypatch) -> None:
    monkeypatch.delenv("SEQCLASS_TEST_INT", raising=False)
    assert env_int("SEQCLASS_TEST_INT", 4) == 4

    monkeypatch.setenv("SEQCLASS_TEST_INT", "16")
    assert env_int("SEQCLASS_TEST_INT", 4) == 16

    monkeypatch.setenv("SEQCLASS_TEST_INT", "many")
    with pytest.raises(ValueError):
        env_int("SEQCLASS_TEST_INT", 4)


@pytest.mark.parametrize(("raw", "expected"), [("512", 512), ("0", None), ("-3", None), ("", None)])
def test_env_optional_int(monkeypatch, raw: str, expected) -> None:
    monkeypatch.setenv("SEQCLASS_TEST_MAXLEN", raw)
    assert env_optional_int("SEQCLASS_TEST_MAXLEN") == expected
