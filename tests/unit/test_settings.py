import pytest
from pydantic import ValidationError

from filesender.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_accepted_formats(self) -> None:
        s = Settings()
        assert s.accepted_formats == ("4.0", "3.1")

    def test_default_freshness_months(self) -> None:
        s = Settings()
        assert s.freshness_months == 1

    def test_default_max_workers(self) -> None:
        s = Settings()
        assert s.max_workers == 1


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_accepted_formats_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCEPTED_FORMATS", '["5.0", "4.0"]')
        s = Settings()
        assert s.accepted_formats == ("5.0", "4.0")

    def test_loads_freshness_months(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRESHNESS_MONTHS", "3")
        s = Settings()
        assert s.freshness_months == 3

    def test_loads_max_workers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_WORKERS", "8")
        s = Settings()
        assert s.max_workers == 8


class TestSettingsValidation:
    def test_zero_freshness_months_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRESHNESS_MONTHS", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_zero_max_workers_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_WORKERS", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_max_workers_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_WORKERS", "abc")
        with pytest.raises(ValidationError):
            Settings()

    def test_empty_accepted_formats_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCEPTED_FORMATS", "[]")
        with pytest.raises(ValidationError):
            Settings()
