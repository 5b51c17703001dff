"""End-to-end tests for the uptime-check command with fake checker and notifier."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import typer
import yaml
from typer.testing import CliRunner

from uptime_check.cli import main
from tests.check.fake_checker import FakeChecker
from tests.notification.fake_notifier import FakeNotifier

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("CHECK_SMTP_PASSWORD", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_config(path: Path, **changes: str) -> None:
    values = {
        "url": "http://x",
        "log": str(path.parent / "monitor.log"),
        "recipient": "ops@example.com",
        "smtp": "smtp.example.com",
        "port": "587",
        "user": "mailer@example.com",
        "password": "pw",
        "subject": "Down",
        "body": "Unreachable: ",
    }
    values.update(changes)
    path.write_text(yaml.safe_dump(values), encoding="utf-8")


def _invoke(
    args: list[str], checker: FakeChecker, notifier: FakeNotifier
) -> tuple[int, str]:
    with (
        patch.object(main, "_build_checker", return_value=checker),
        patch.object(main, "_build_notifier", return_value=notifier),
    ):
        result = runner.invoke(main.app, ["--log-format", "json", *args])
    return result.exit_code, result.output


def _last_record(log_path: Path) -> dict[str, object]:
    lines = [line for line in log_path.read_text(encoding="utf-8").splitlines() if line]
    return json.loads(lines[-1])


class TestNotificationFlow:
    def test_failure_notifies_once_then_suppresses(self, workspace: Path) -> None:
        config = workspace / ".check.yaml"
        _write_config(config)
        log_path = workspace / "monitor.log"

        first = FakeNotifier()
        exit_code, _ = _invoke(["-c", str(config)], FakeChecker(503), first)

        assert exit_code == 0
        assert len(first.sent) == 1
        assert first.sent[0].subject == "Downhttp://x"
        record = _last_record(log_path)
        assert record["event"] == "run.completed"
        assert record["incident"] == "Down"

        second = FakeNotifier()
        exit_code, _ = _invoke(["-c", str(config)], FakeChecker(503), second)

        assert exit_code == 0
        assert second.sent == []
        assert _last_record(log_path)["decision"] == "suppressed"

    def test_recovery_rearms_notification(self, workspace: Path) -> None:
        config = workspace / ".check.yaml"
        _write_config(config)
        log_path = workspace / "monitor.log"

        _invoke(["-c", str(config)], FakeChecker(503), FakeNotifier())
        _invoke(["-c", str(config)], FakeChecker(200), FakeNotifier())

        assert "incident" not in _last_record(log_path)

        notifier = FakeNotifier()
        _invoke(["-c", str(config)], FakeChecker(503), notifier)

        assert len(notifier.sent) == 1

    def test_incomplete_settings_block_and_exit_zero(self, workspace: Path) -> None:
        config = workspace / ".check.yaml"
        _write_config(config, password="")
        notifier = FakeNotifier()

        exit_code, output = _invoke(["-c", str(config)], FakeChecker(503), notifier)

        assert exit_code == 0
        assert notifier.sent == []
        assert "notification.blocked" in output
        assert _last_record(workspace / "monitor.log")["decision"] == "blocked"

    def test_failed_send_is_retried_next_run(self, workspace: Path) -> None:
        config = workspace / ".check.yaml"
        _write_config(config)

        _invoke(["-c", str(config)], FakeChecker(503), FakeNotifier(fail_with="down"))
        notifier = FakeNotifier()
        _invoke(["-c", str(config)], FakeChecker(503), notifier)

        assert len(notifier.sent) == 1


class TestConfiguration:
    def test_flags_override_config_and_are_persisted(self, workspace: Path) -> None:
        config = workspace / ".check.yaml"
        _write_config(config)
        checker = FakeChecker(200)

        exit_code, _ = _invoke(
            ["-c", str(config), "-U", "http://override", "-j", "Outage"],
            checker,
            FakeNotifier(),
        )

        assert exit_code == 0
        assert checker.requests[0][0] == "http://override"
        saved = yaml.safe_load(config.read_text(encoding="utf-8"))
        assert saved["url"] == "http://override"
        assert saved["subject"] == "Outage"
        assert saved["recipient"] == "ops@example.com"
        assert saved["config"] == str(config)

    def test_config_found_in_home_directory(self, workspace: Path) -> None:
        _write_config(workspace / ".check.yaml", url="http://from-home")
        checker = FakeChecker(200)

        exit_code, _ = _invoke([], checker, FakeNotifier())

        assert exit_code == 0
        assert checker.requests[0][0] == "http://from-home"

    def test_missing_url_is_reported_and_config_still_saved(
        self, workspace: Path
    ) -> None:
        target = workspace / "new.yaml"
        checker = FakeChecker(200)

        exit_code, output = _invoke(
            ["-c", str(target), "-r", "ops@example.com"], checker, FakeNotifier()
        )

        assert exit_code == 0
        assert checker.requests == []
        assert "run.url_missing" in output
        saved = yaml.safe_load(target.read_text(encoding="utf-8"))
        assert saved["recipient"] == "ops@example.com"
        assert saved["url"] == ""

    def test_password_read_from_environment(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config = workspace / ".check.yaml"
        _write_config(config, password="")
        monkeypatch.setenv("CHECK_SMTP_PASSWORD", "from-env")
        notifier = FakeNotifier()

        _invoke(["-c", str(config)], FakeChecker(503), notifier)

        assert notifier.sent[0].password == "from-env"

    def test_password_is_not_logged_in_debug_mode(self, workspace: Path) -> None:
        config = workspace / ".check.yaml"
        _write_config(config, password="super-secret")

        exit_code, output = _invoke(
            ["-c", str(config), "-d"], FakeChecker(200), FakeNotifier()
        )

        assert exit_code == 0
        assert "config.resolved" in output
        assert "super-secret" not in output

    def test_invalid_log_format_exits_one(self, workspace: Path) -> None:
        result = runner.invoke(main.app, ["--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.output

    def test_subject_help_warns_about_common_log_text(self) -> None:
        command = typer.main.get_command(main.app)
        subject = next(param for param in command.params if param.name == "subject")

        assert "already sent" in subject.help
        assert "'completed'" in subject.help
