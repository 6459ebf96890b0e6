import pytest
from pydantic import ValidationError

from imagefilter.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 8082
    assert s.REQUIRE_AUTH is True
    assert s.jwt_algorithms == ["HS256"]
    assert s.FETCH_TIMEOUT == 20.0


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("JWT_SECRET", "from-env")
    s = Settings(_env_file=None)
    assert s.PORT == 9000
    assert s.JWT_SECRET == "from-env"


def test_algorithm_and_origin_lists():
    s = Settings(_env_file=None, JWT_ALGORITHMS="HS256, HS512", CORS_ALLOW_ORIGINS="http://a, http://b")
    assert s.jwt_algorithms == ["HS256", "HS512"]
    assert s.cors_origins == ["http://a", "http://b"]


def test_settings_are_immutable():
    s = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        s.PORT = 1
