"""Unit tests for Settings class and get_settings function."""

from collections.abc import Callable
from pathlib import Path

import pydantic
import pytest

from flatvec.config import get_settings, reload_settings
from flatvec.config.models import LoggingConfig, SearchConfig
from flatvec.config.settings import Settings, TomlValuesSource, set_toml_config


@pytest.fixture
def configured(
    test_config_dir: Path,
    mock_toml_files: Callable[[dict[str, str]], None],
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[str], None]:
    """Write default.toml and point the loader at it."""
    monkeypatch.setenv("FLATVEC_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("FLATVEC_ENV", "nonexistent")

    def _configure(default_toml: str) -> None:
        mock_toml_files({"default.toml": default_toml})

    return _configure


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "flatvec"
        assert settings.debug is False

    def test_search_defaults(self) -> None:
        assert Settings().search.default_top_k == 5

    def test_observability_defaults(self) -> None:
        settings = Settings()
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.logging.format == "json"


class TestModels:
    """Tests for configuration section models."""

    def test_negative_default_top_k_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SearchConfig(default_top_k=-1)

    def test_zero_default_top_k_allowed(self) -> None:
        assert SearchConfig(default_top_k=0).default_top_k == 0

    def test_unknown_log_format_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LoggingConfig(format="xml")  # type: ignore[arg-type]


class TestGetSettings:
    """Tests for get_settings function."""

    def test_reads_toml(self, configured: Callable[[str], None]) -> None:
        configured("app_name = 'test'\n[search]\ndefault_top_k = 3")

        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.app_name == "test"
        assert settings.search.default_top_k == 3

    def test_reads_nested_logging_table(self, configured: Callable[[str], None]) -> None:
        configured("[observability.logging]\nlevel = 'DEBUG'\nformat = 'console'")

        logging_config = get_settings().observability.logging
        assert logging_config.level == "DEBUG"
        assert logging_config.format == "console"

    def test_settings_cached(self, configured: Callable[[str], None]) -> None:
        configured("app_name = 'cached'")

        assert get_settings() is get_settings()

    def test_reload_settings_clears_cache(
        self, configured: Callable[[str], None], test_config_dir: Path
    ) -> None:
        configured("app_name = 'original'")
        assert get_settings().app_name == "original"

        (test_config_dir / "default.toml").write_text("app_name = 'updated'")

        assert reload_settings().app_name == "updated"

    def test_missing_config_raises(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLATVEC_CONFIG_DIR", str(test_config_dir))

        with pytest.raises(FileNotFoundError):
            get_settings()

    def test_invalid_toml_value_rejected(self, configured: Callable[[str], None]) -> None:
        configured("[search]\ndefault_top_k = -2")

        with pytest.raises(pydantic.ValidationError):
            get_settings()


class TestEnvironmentVariableOverrides:
    """Tests for environment variable configuration overrides."""

    def test_top_level_override(
        self, configured: Callable[[str], None], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        configured("debug = false")
        monkeypatch.setenv("FLATVEC_DEBUG", "true")

        assert get_settings().debug is True

    def test_nested_override(
        self, configured: Callable[[str], None], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nested values can be overridden with double underscore."""
        configured("[search]\ndefault_top_k = 5")
        monkeypatch.setenv("FLATVEC_SEARCH__DEFAULT_TOP_K", "12")

        assert get_settings().search.default_top_k == 12

    def test_deeply_nested_override(
        self, configured: Callable[[str], None], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        configured("[observability.logging]\nlevel = 'INFO'")
        monkeypatch.setenv("FLATVEC_OBSERVABILITY__LOGGING__LEVEL", "ERROR")

        assert get_settings().observability.logging.level == "ERROR"


class TestTomlValuesSource:
    """Tests for the TOML settings source."""

    def test_returns_known_fields_only(self) -> None:
        source = TomlValuesSource(
            Settings, {"debug": True, "search": {"default_top_k": 4}, "unknown": 1}
        )
        assert source() == {"debug": True, "search": {"default_top_k": 4}}

    def test_does_not_mutate_values(self) -> None:
        values = {"debug": True}
        source = TomlValuesSource(Settings, values)
        source()["debug"] = False
        assert values == {"debug": True}

    def test_env_beats_toml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        set_toml_config({"search": {"default_top_k": 4}})
        monkeypatch.setenv("FLATVEC_SEARCH__DEFAULT_TOP_K", "9")

        assert Settings().search.default_top_k == 9

    def test_init_beats_toml(self) -> None:
        set_toml_config({"app_name": "from-toml"})

        assert Settings(app_name="explicit").app_name == "explicit"
