"""Select the failing cases out of a suite tree."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from junit_notify.report import Error, Failure, Skipped, TestCase, TestStatus, TestSuite

__all__ = ["SkipPolicy", "collect_failed_cases", "has_failures"]


class SkipPolicy(str, Enum):
    """Whether skipped cases are reported alongside failures."""

    EXCLUDE = "exclude"
    INCLUDE = "include"


def has_failures(case: TestCase, *, skip_policy: SkipPolicy = SkipPolicy.EXCLUDE) -> bool:
    """Return True when ``case`` failed or errored; detail payloads are ignored."""

    return _status_fails(case.status, skip_policy)


def _status_fails(status: TestStatus, skip_policy: SkipPolicy) -> bool:
    if isinstance(status, (Failure, Error)):
        return True
    if isinstance(status, Skipped):
        return skip_policy is SkipPolicy.INCLUDE
    return False


def collect_failed_cases(
    suites: Iterable[TestSuite],
    *,
    skip_policy: SkipPolicy = SkipPolicy.EXCLUDE,
) -> list[TestCase]:
    """Walk ``suites`` depth-first, nested suites before each suite's own cases."""

    result: list[TestCase] = []
    # (suite, children_done): a suite is revisited once its nested suites are emitted.
    stack: list[tuple[TestSuite, bool]] = [(suite, False) for suite in reversed(list(suites))]
    while stack:
        suite, children_done = stack.pop()
        if children_done:
            result.extend(case for case in suite.cases if has_failures(case, skip_policy=skip_policy))
            continue
        stack.append((suite, True))
        stack.extend((child, False) for child in reversed(suite.suites))
    return result
