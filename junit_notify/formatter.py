"""Render failing cases as Slack mrkdwn."""

from __future__ import annotations

from typing import Sequence

from junit_notify.report import TestCase
from junit_notify.settings import DEFAULT_TITLE

__all__ = ["format_case_line", "format_message"]

FAILURE_EMOJI = ":x:"


def format_message(failed_cases: Sequence[TestCase], *, title: str = DEFAULT_TITLE) -> str:
    lines = [f"{FAILURE_EMOJI} *{title}*\n\n"]
    lines.extend(format_case_line(case) for case in failed_cases)
    return "".join(lines)


def format_case_line(case: TestCase) -> str:
    return f"-`{case.name}`\n"
