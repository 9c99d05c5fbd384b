"""Tests for environment-driven settings."""

from atago import Unit, UnitSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("ATAGO_WARN_ON_TRAIT_COLLISION", raising=False)
    monkeypatch.delenv("ATAGO_VALIDATE_PROPERTY_KEYS", raising=False)

    settings = UnitSettings(_env_file=None)

    assert settings.warn_on_trait_collision is False
    assert settings.validate_property_keys is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ATAGO_WARN_ON_TRAIT_COLLISION", "true")
    monkeypatch.setenv("ATAGO_VALIDATE_PROPERTY_KEYS", "0")

    settings = UnitSettings(_env_file=None)

    assert settings.warn_on_trait_collision is True
    assert settings.validate_property_keys is False


def test_unit_reads_environment_when_no_settings_given(monkeypatch, recwarn):
    monkeypatch.setenv("ATAGO_WARN_ON_TRAIT_COLLISION", "1")
    u = Unit("u", "U")
    u.set_property("brave", 2)

    u.add_trait("brave")

    assert any("overwrites non-boolean" in str(w.message) for w in recwarn)
