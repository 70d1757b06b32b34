import pytest
from pydantic import ValidationError

from artistly.core.config import Settings


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings().CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test"]')
    assert Settings().CORS_ORIGINS == ["http://a.test"]


def test_cors_allow_all(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ALL", "true")
    assert Settings().CORS_ORIGINS == ["*"]


def test_delays_from_env(monkeypatch):
    monkeypatch.setenv("STATUS_TRANSITION_DELAY_SECONDS", "0.25")
    monkeypatch.setenv("ENFORCE_PENDING_TRANSITIONS", "false")
    s = Settings()
    assert s.STATUS_TRANSITION_DELAY_SECONDS == 0.25
    assert s.INTAKE_SUBMIT_DELAY_SECONDS == 2.0
    assert s.ENFORCE_PENDING_TRANSITIONS is False


def test_negative_delay_rejected(monkeypatch):
    monkeypatch.setenv("INTAKE_SUBMIT_DELAY_SECONDS", "-1")
    with pytest.raises(ValidationError):
        Settings()
