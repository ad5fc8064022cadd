"""junit-notify: send failing JUnit cases to Slack."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from junit_notify.collector import collect_failed_cases
from junit_notify.errors import NotifyError
from junit_notify.formatter import format_message
from junit_notify.notifier import send_message
from junit_notify.report import load_report
from junit_notify.settings import NotifySettings, load_settings

LOGGER = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)
cli = typer.Typer(
    help="Post failing JUnit test cases to a Slack incoming webhook.",
    add_completion=False,
)


def _resolve_settings() -> NotifySettings:
    return load_settings()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_time=False)],
    )


async def notify(report_path: Path, settings: NotifySettings) -> bool:
    """Run one report through the pipeline; True when a message was sent."""

    suites = load_report(report_path)
    failed_cases = collect_failed_cases(suites)
    LOGGER.debug("%s failing case(s) in %s", len(failed_cases), report_path)
    if not failed_cases:
        console.print("[green]All tests passed successfully![/]")
        return False

    message = format_message(failed_cases, title=settings.title)
    await send_message(message, settings.webhook_url, timeout=settings.timeout_seconds)
    return True


def _fail(exc: NotifyError) -> NoReturn:
    err_console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


@cli.command()
def run(
    report: Path = typer.Argument(
        Path("junit.xml"),
        help="Path to the JUnit XML report.",
        show_default=True,
    ),
) -> None:
    """Notify Slack when the report contains failed or errored test cases."""

    try:
        settings = _resolve_settings()
    except NotifyError as exc:
        _fail(exc)
    _configure_logging(settings.log_level)

    try:
        asyncio.run(notify(report, settings))
    except NotifyError as exc:
        _fail(exc)


def main() -> None:
    cli()


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
