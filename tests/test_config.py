"""Unit tests for core/config.py -- Settings and the signing key policy.

Covers:
- Development without a key generates one
- Production without a key refuses to start
- short keys are rejected in every environment
- JWT settings are read from double-underscore environment variables
"""

import pytest
from pydantic import ValidationError

from core.config import JwtConfig, Settings

GOOD_KEY = "k" * 32


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVIRONMENT", "JWT", "JWT__SECRET_KEY", "JWT__ISSUER", "JWT__AUDIENCE", "JWT__LIFETIME_MINUTES"):
        monkeypatch.delenv(name, raising=False)


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_development_generates_key() -> None:
    settings = _settings(environment="Development")
    assert settings.is_development
    assert len(settings.jwt.secret_key) >= 32


def test_generated_keys_differ_per_instance() -> None:
    first = _settings(environment="Development")
    second = _settings(environment="Development")
    assert first.jwt.secret_key != second.jwt.secret_key


def test_production_requires_key() -> None:
    with pytest.raises(ValidationError, match="JWT__SECRET_KEY is required"):
        _settings(environment="Production")


def test_short_key_rejected() -> None:
    with pytest.raises(ValidationError, match="at least 32 characters"):
        _settings(environment="Development", jwt=JwtConfig(secret_key="short"))


def test_non_positive_lifetime_rejected() -> None:
    with pytest.raises(ValidationError):
        JwtConfig(secret_key=GOOD_KEY, lifetime_minutes=0)


def test_explicit_key_kept() -> None:
    settings = _settings(environment="Production", jwt=JwtConfig(secret_key=GOOD_KEY))
    assert settings.jwt.secret_key == GOOD_KEY
    assert not settings.is_development


def test_reads_nested_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "Production")
    monkeypatch.setenv("JWT__SECRET_KEY", GOOD_KEY)
    monkeypatch.setenv("JWT__ISSUER", "env-issuer")
    monkeypatch.setenv("JWT__AUDIENCE", "env-audience")
    monkeypatch.setenv("JWT__LIFETIME_MINUTES", "15")
    settings = _settings()
    assert settings.jwt == JwtConfig(
        secret_key=GOOD_KEY,
        issuer="env-issuer",
        audience="env-audience",
        lifetime_minutes=15,
    )
