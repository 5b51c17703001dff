"""Tests for ConfigResolver: loading, merging and persisting with observer events."""

from pathlib import Path

import yaml

from uptime_check.config.application.resolver import ConfigResolver
from uptime_check.config.domain.settings import PartialSettings, Settings
from uptime_check.config.infrastructure.yaml_store import YamlConfigStore
from tests.config.fake_observer import FakeConfigObserver


def _resolver(observer: FakeConfigObserver) -> ConfigResolver:
    return ConfigResolver(store=YamlConfigStore(), observer=observer)


class TestLoad:
    def test_missing_config_yields_empty_settings(self, tmp_path: Path) -> None:
        observer = FakeConfigObserver()

        loaded = _resolver(observer).load(search_paths=[tmp_path])

        assert loaded.path is None
        assert loaded.settings == PartialSettings()
        assert observer.not_found == [[str(tmp_path)]]
        assert observer.loaded == []

    def test_found_config_is_loaded_and_reported(self, tmp_path: Path) -> None:
        config = tmp_path / ".check.yaml"
        config.write_text("url: http://x\nsubject: Down\n", encoding="utf-8")
        observer = FakeConfigObserver()

        loaded = _resolver(observer).load(search_paths=[tmp_path])

        assert loaded.path == config
        assert loaded.settings.url == "http://x"
        assert observer.loaded == [str(config)]

    def test_broken_config_is_reported_and_ignored(self, tmp_path: Path) -> None:
        config = tmp_path / ".check.yaml"
        config.write_text("url: [broken\n", encoding="utf-8")
        observer = FakeConfigObserver()

        loaded = _resolver(observer).load(search_paths=[tmp_path])

        assert loaded.settings == PartialSettings()
        assert loaded.path == config
        assert len(observer.load_failures) == 1
        assert observer.load_failures[0]["path"] == str(config)


class TestResolve:
    def test_resolve_reports_redacted_settings(self) -> None:
        observer = FakeConfigObserver()

        settings = _resolver(observer).resolve(
            persisted=PartialSettings(smtp_password="pw"),
            overrides=PartialSettings(url="http://x"),
        )

        assert settings.url == "http://x"
        assert settings.smtp_password == "pw"
        assert observer.resolved[0]["password"] == "***"


class TestPersist:
    def test_writes_to_target_path(self, tmp_path: Path) -> None:
        target = tmp_path / "custom.yaml"
        observer = FakeConfigObserver()

        written = _resolver(observer).persist(
            settings=Settings(url="http://x"), target_path=target
        )

        assert written == target
        assert yaml.safe_load(target.read_text(encoding="utf-8"))["url"] == "http://x"
        assert observer.saved == [str(target)]

    def test_target_path_takes_precedence_over_loaded_file(self, tmp_path: Path) -> None:
        target = tmp_path / "custom.yaml"
        loaded_from = tmp_path / ".check.yaml"
        loaded_from.write_text("url: http://old\n", encoding="utf-8")

        _resolver(FakeConfigObserver()).persist(
            settings=Settings(url="http://new"),
            target_path=target,
            loaded_from=loaded_from,
        )

        assert "http://old" in loaded_from.read_text(encoding="utf-8")
        assert "http://new" in target.read_text(encoding="utf-8")

    def test_falls_back_to_loaded_file(self, tmp_path: Path) -> None:
        loaded_from = tmp_path / ".check.yaml"
        loaded_from.write_text("url: http://old\n", encoding="utf-8")
        observer = FakeConfigObserver()

        written = _resolver(observer).persist(
            settings=Settings(url="http://new"),
            target_path=None,
            loaded_from=loaded_from,
        )

        assert written == loaded_from
        assert "http://new" in loaded_from.read_text(encoding="utf-8")

    def test_no_location_is_reported_not_raised(self) -> None:
        observer = FakeConfigObserver()

        written = _resolver(observer).persist(settings=Settings(), target_path=None)

        assert written is None
        assert len(observer.save_failures) == 1
        assert observer.save_failures[0]["path"] is None
        assert observer.saved == []

    def test_write_failure_is_reported_not_raised(self, tmp_path: Path) -> None:
        observer = FakeConfigObserver()
        unwritable = tmp_path / "missing-dir" / ".check.yaml"

        written = _resolver(observer).persist(
            settings=Settings(url="http://x"), target_path=unwritable
        )

        assert written is None
        assert observer.save_failures[0]["path"] == str(unwritable)
        assert str(observer.save_failures[0]["reason"]).startswith("Failed to ")
