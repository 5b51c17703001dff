"""CLI entrypoint for uptime-check: a typer command that runs one uptime check."""

import sys
from pathlib import Path
from typing import TextIO

import typer

from uptime_check.check.domain.checker import HttpChecker
from uptime_check.check.infrastructure.httpx_checker import HttpxChecker
from uptime_check.check.infrastructure.observer import StructlogCheckObserver
from uptime_check.cli.log_setup import TeeStream, build_logger, level_for
from uptime_check.config.application.resolver import ConfigResolver
from uptime_check.config.domain.settings import PartialSettings
from uptime_check.config.infrastructure.observer import StructlogConfigObserver
from uptime_check.config.infrastructure.yaml_store import (
    YamlConfigStore,
    default_search_paths,
)
from uptime_check.core.errors import UptimeCheckError
from uptime_check.monitor.application.runner import MonitorRunner
from uptime_check.monitor.infrastructure.observer import StructlogMonitorObserver
from uptime_check.notification.application.gate import NotificationGate
from uptime_check.notification.domain.log_tail import LogTail
from uptime_check.notification.domain.notifier import Notifier
from uptime_check.notification.infrastructure.errors import LogOpenError, LogReadError
from uptime_check.notification.infrastructure.log_file import LogFile
from uptime_check.notification.infrastructure.observer import (
    StructlogNotificationObserver,
)
from uptime_check.notification.infrastructure.smtp_notifier import SmtpNotifier

app = typer.Typer(
    add_completion=False,
    help=(
        "Check is a simple uptime monitor. It checks a given URL once and sends"
        " an email notification if the URL is not reachable. Run it from cron or"
        " a systemd timer to check periodically. Settings come from command line"
        " flags or a YAML config file (.check.yaml in /etc/check, $HOME or the"
        " working directory) and are saved back to that file after each run."
    ),
)


def _build_checker(observer: StructlogCheckObserver) -> HttpChecker:
    return HttpxChecker(observer=observer)


def _build_notifier() -> Notifier:
    return SmtpNotifier()


def _read_log_tail(log_file: LogFile | None) -> tuple[LogTail, str | None]:
    """Snapshot the log tail; returns an empty tail plus the reason when unreadable."""
    if log_file is None:
        return LogTail(), None
    try:
        return log_file.read_tail(), None
    except LogReadError as exc:
        return LogTail(), str(exc)


def _open_log_sink(log_file: LogFile | None) -> tuple[TextIO | None, str | None]:
    if log_file is None:
        return None, None
    try:
        return log_file.open_append(), None
    except LogOpenError as exc:
        return None, str(exc)


@app.command()
def check(
    url: str = typer.Option("", "--URL", "--url", "-U", help="URL to check"),
    log: str = typer.Option("", "--log", "-l", help="Log file to write to"),
    author: str = typer.Option(
        "", "--author", "-a", help="Author's email address of the email notification"
    ),
    recipient: str = typer.Option(
        "", "--recipient", "-r", help="Recipient of the email notification"
    ),
    config: str = typer.Option("", "--config", "-c", help="Config file to use"),
    smtp: str = typer.Option("", "--smtp", "-s", help="SMTP server to use"),
    port: str = typer.Option("", "--port", "-o", help="Port of the SMTP server"),
    user: str = typer.Option("", "--user", "-u", help="User login for the SMTP server"),
    password: str = typer.Option(
        "",
        "--password",
        "-p",
        envvar="CHECK_SMTP_PASSWORD",
        show_envvar=True,
        help="Password for the SMTP server",
    ),
    subject: str = typer.Option(
        "",
        "--subject",
        "-j",
        help=(
            "Subject of the email notification. Also used to spot an alert"
            " already sent, so it must not be text found in every log record"
            " (e.g. 'info', 'completed' or a year)"
        ),
    ),
    body: str = typer.Option("", "--body", "-b", help="Body of the email notification"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug mode"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Check a URL once and email a notification if it is down.

    Example: uptime-check -U https://example.com -l monitor.log
    """
    stdout = sys.stdout
    try:
        bootstrap_log = build_logger(
            level=level_for(debug=debug), log_format=log_format, stream=stdout
        )
    except ValueError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    overrides = PartialSettings(
        url=url,
        log_path=log,
        author=author,
        recipient=recipient,
        config_path=config,
        smtp_host=smtp,
        smtp_port=port,
        smtp_user=user,
        smtp_password=password,
        subject=subject,
        body=body,
        debug=debug,
    )

    sink: TextIO | None = None
    try:
        store = YamlConfigStore()
        loader = ConfigResolver(
            store=store, observer=StructlogConfigObserver(log=bootstrap_log)
        )
        explicit = Path(config) if config else None
        loaded = loader.load(search_paths=default_search_paths(explicit=explicit))
        settings = loader.resolve(persisted=loaded.settings, overrides=overrides)

        # The tail is read before this run appends, so its last line belongs
        # to the previous run.
        log_file = LogFile(Path(settings.log_path)) if settings.log_path else None
        log_tail, tail_error = _read_log_tail(log_file=log_file)
        sink, sink_error = _open_log_sink(log_file=log_file)

        stream: TextIO = TeeStream([stdout, sink]) if sink is not None else stdout
        run_log = build_logger(
            level=level_for(debug=settings.debug),
            log_format=log_format,
            stream=stream,
            colors=sink is None,
        )

        monitor_observer = StructlogMonitorObserver(log=run_log)
        if log_file is not None:
            if sink_error is not None:
                monitor_observer.log_sink_unavailable(
                    path=str(log_file.path), reason=sink_error
                )
            if tail_error is not None:
                monitor_observer.log_tail_unavailable(
                    path=str(log_file.path), reason=tail_error
                )
            else:
                monitor_observer.log_tail_read(
                    path=str(log_file.path), last_line=log_tail.last_line
                )

        runner = MonitorRunner(
            checker=_build_checker(observer=StructlogCheckObserver(log=run_log)),
            gate=NotificationGate(
                notifier=_build_notifier(),
                observer=StructlogNotificationObserver(log=run_log),
            ),
            observer=monitor_observer,
        )
        summary = runner.run(settings=settings, log_tail=log_tail)

        # Saving reports to the run log, which by now includes the log file.
        saver = ConfigResolver(
            store=store, observer=StructlogConfigObserver(log=run_log)
        )
        saver.persist(
            settings=settings,
            target_path=Path(settings.config_path) if settings.config_path else None,
            loaded_from=loaded.path,
        )

        monitor_observer.run_completed(
            decision=str(summary.decision) if summary.decision is not None else None,
            delivered=summary.delivered,
            incident=summary.incident,
        )

    except KeyboardInterrupt:
        typer.echo("Check interrupted.")
        sys.exit(1)
    except UptimeCheckError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)
    finally:
        if sink is not None:
            sink.close()


if __name__ == "__main__":
    app()
