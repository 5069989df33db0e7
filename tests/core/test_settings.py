import dataclasses

import pytest

from core.config import DEFAULT_SETTINGS, UtilSettings


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for field in dataclasses.fields(UtilSettings):
        monkeypatch.delenv("JMNI_" + field.name.upper(), raising=False)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    settings = UtilSettings.from_env()
    assert settings == UtilSettings()
    assert settings.signature_secret == "jmni-until"
    assert settings.nonce_size == 16
    assert settings.timezone == "Asia/Shanghai"
    assert settings.date_format == "yyyy-MM-dd HH:mm:ss"
    assert settings.uid_random_length == 8


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("JMNI_SIGNATURE_SECRET", "s3cret")
    monkeypatch.setenv("JMNI_NONCE_SIZE", "32")
    monkeypatch.setenv("JMNI_TIMEZONE", " UTC ")
    monkeypatch.setenv("JMNI_DATE_FORMAT", "yyyy/MM/dd")
    monkeypatch.setenv("JMNI_UID_RANDOM_LENGTH", "4")

    settings = UtilSettings.from_env()
    assert settings == UtilSettings(
        signature_secret="s3cret",
        nonce_size=32,
        timezone="UTC",
        date_format="yyyy/MM/dd",
        uid_random_length=4,
    )


def test_custom_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_TIMEZONE", "Europe/Berlin")
    assert UtilSettings.from_env(prefix="APP_").timezone == "Europe/Berlin"


def test_blank_and_invalid_values_fall_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("JMNI_SIGNATURE_SECRET", "   ")
    monkeypatch.setenv("JMNI_NONCE_SIZE", "many")
    monkeypatch.setenv("JMNI_UID_RANDOM_LENGTH", "")

    with caplog.at_level("WARNING", logger="core.config"):
        settings = UtilSettings.from_env()

    assert settings.signature_secret == "jmni-until"
    assert settings.nonce_size == 16
    assert settings.uid_random_length == 8
    assert any("JMNI_NONCE_SIZE" in record.getMessage() for record in caplog.records)


def test_sizes_are_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("JMNI_NONCE_SIZE", "0")
    monkeypatch.setenv("JMNI_UID_RANDOM_LENGTH", "-3")
    settings = UtilSettings.from_env()
    assert settings.nonce_size == 1
    assert settings.uid_random_length == 0


def test_settings_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.nonce_size = 3  # type: ignore[misc]
