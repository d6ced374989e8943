from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from graphql_id import ID
from graphql_id.config import Settings, get_settings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.unsigned_overflow == "wrap"
    assert get_settings() is settings


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPHQL_ID_UNSIGNED_OVERFLOW", " ERROR ")

    settings = Settings()

    assert settings.unsigned_overflow == "error"


def test_invalid_overflow_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPHQL_ID_UNSIGNED_OVERFLOW", "saturate")

    with pytest.raises(ValidationError):
        Settings()


def test_oid_fallback_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="graphql_id.identifiers")

    assert ID.from_string("$oid:not_valid") == ID.with_string("$oid:not_valid")

    records = [record for record in caplog.records if record.name == "graphql_id.identifiers"]
    assert [record.levelno for record in records] == [logging.DEBUG]
    assert "$oid:not_valid" in records[0].getMessage()


def test_oid_fallback_is_silent_above_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="graphql_id.identifiers")

    ID.from_string("$oid:not_valid")

    assert not [record for record in caplog.records if record.name == "graphql_id.identifiers"]
