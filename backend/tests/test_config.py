import pytest
from pydantic import ValidationError

from balance_api.config import Settings


def test_port_defaults_to_10000(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).port == 10000  # type: ignore[call-arg]


def test_port_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080  # type: ignore[call-arg]


@pytest.mark.parametrize("value", ["abc", "0", "70000"])
def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_log_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "false")
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.log_level == "debug"
    assert settings.log_json is False
