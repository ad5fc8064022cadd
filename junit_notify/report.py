"""Load JUnit XML reports into an in-memory suite/case tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
import xml.etree.ElementTree as ET

from junit_notify.errors import ReportParseError, ReportReadError

__all__ = [
    "Error",
    "Failure",
    "Skipped",
    "Success",
    "TestCase",
    "TestStatus",
    "TestSuite",
    "load_report",
    "parse_report",
]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Success:
    """Test case passed."""


@dataclass(frozen=True, slots=True)
class Failure:
    """An assertion failed (``<failure>``)."""

    message: str = ""
    text: str = ""
    failure_type: str = ""


@dataclass(frozen=True, slots=True)
class Error:
    """The test raised unexpectedly (``<error>``)."""

    message: str = ""
    text: str = ""
    error_type: str = ""


@dataclass(frozen=True, slots=True)
class Skipped:
    """The test did not run (``<skipped>``)."""

    message: str = ""
    text: str = ""
    skipped_type: str = ""


TestStatus = Success | Failure | Error | Skipped


@dataclass(frozen=True, slots=True)
class TestCase:
    __test__ = False

    name: str
    status: TestStatus = field(default_factory=Success)
    classname: str | None = None
    time: float = 0.0


@dataclass(slots=True)
class TestSuite:
    __test__ = False

    name: str = ""
    tests: int = 0
    failures: int = 0
    errors: int = 0
    skipped: int = 0
    time: float = 0.0
    cases: list[TestCase] = field(default_factory=list)
    suites: list["TestSuite"] = field(default_factory=list)


def load_report(path: Path | str) -> list[TestSuite]:
    """Read ``path`` and return its top-level test suites."""

    report_path = Path(path)
    try:
        raw = report_path.read_bytes()
    except OSError as exc:
        raise ReportReadError(report_path, exc.strerror or str(exc)) from exc
    return parse_report(raw, source=report_path)


def parse_report(raw: bytes | str, *, source: Path | str = "<memory>") -> list[TestSuite]:
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        raise ReportParseError(source, str(exc)) from exc

    if root.tag == "testsuites":
        suites = [_parse_suite(child) for child in root.findall("testsuite")]
    elif root.tag == "testsuite":
        suites = [_parse_suite(root)]
    else:
        raise ReportParseError(source, f"unexpected root element <{root.tag}>")

    LOGGER.debug("Loaded %s top-level suite(s) from %s", len(suites), source)
    return suites


def _parse_suite(element: ET.Element) -> TestSuite:
    root = _suite_header(element)
    pending = [(element, root)]
    while pending:
        current, suite = pending.pop()
        for child in current:
            if child.tag == "testsuite":
                nested = _suite_header(child)
                suite.suites.append(nested)
                pending.append((child, nested))
            elif child.tag == "testcase":
                suite.cases.append(_parse_case(child))
    return root


def _suite_header(element: ET.Element) -> TestSuite:
    return TestSuite(
        name=element.attrib.get("name", ""),
        tests=_int_attr(element, "tests"),
        failures=_int_attr(element, "failures"),
        errors=_int_attr(element, "errors"),
        skipped=_int_attr(element, "skipped"),
        time=_float_attr(element, "time"),
    )


def _parse_case(element: ET.Element) -> TestCase:
    return TestCase(
        name=element.attrib.get("name", ""),
        classname=element.attrib.get("classname"),
        time=_float_attr(element, "time"),
        status=_parse_status(element),
    )


def _parse_status(element: ET.Element) -> TestStatus:
    for child in element:
        message = child.attrib.get("message", "")
        kind = child.attrib.get("type", "")
        text = (child.text or "").strip()
        if child.tag == "failure":
            return Failure(message=message, text=text, failure_type=kind)
        if child.tag == "error":
            return Error(message=message, text=text, error_type=kind)
        if child.tag == "skipped":
            return Skipped(message=message, text=text, skipped_type=kind)
    return Success()


def _int_attr(element: ET.Element, key: str) -> int:
    try:
        return int(element.attrib.get(key, 0) or 0)
    except (TypeError, ValueError):
        return 0


def _float_attr(element: ET.Element, key: str) -> float:
    raw = (element.attrib.get(key) or "").replace(",", "")
    try:
        return float(raw) if raw else 0.0
    except ValueError:
        return 0.0
