"""Output as a JUnit XML report."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TextIO

from .result import unsupported_report

_ENTITIES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _valid_xml_char(char: str) -> bool:
    code = ord(char)
    return (
        code in (0x9, 0xA, 0xD)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def _escape(text: str) -> str:
    return "".join(
        _ENTITIES.get(char, char) if _valid_xml_char(char) else "\ufffd" for char in text
    )


class _Outcome(Enum):
    SUCCEEDED = auto()
    FAILED = auto()
    SKIPPED = auto()


@dataclass
class _Case:
    name: str
    outcome: _Outcome
    text: str = ""


@dataclass
class JUnit:
    """Writes results as JUnit test suites, one per namespace."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)
    hide_message: bool = False
    version: str = field(default_factory=platform.python_version)

    def format_test_name(self, file_name: str, message: str) -> str:
        if self.hide_message or message == "":
            return file_name
        summary = message.split("\n")[0]
        return f"{file_name} - {summary}"

    def output(self, results) -> None:
        suites: dict[str, list[_Case]] = {}
        for result in results:
            cases = []
            for item in result.warnings:
                cases.append(_Case(self.format_test_name(result.file_name, item.message), _Outcome.FAILED, item.message))
            for item in result.failures:
                cases.append(_Case(self.format_test_name(result.file_name, item.message), _Outcome.FAILED, item.message))
            for item in result.skipped:
                cases.append(_Case(self.format_test_name(result.file_name, item.message), _Outcome.SKIPPED, item.message))
            cases.extend(
                _Case(self.format_test_name(result.file_name, ""), _Outcome.SUCCEEDED)
                for _ in range(result.successes)
            )
            if cases:
                suites.setdefault(result.namespace, []).extend(cases)

        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        if not suites:
            lines.append("<testsuites></testsuites>")
        else:
            lines.append("<testsuites>")
            for namespace, cases in suites.items():
                lines.extend(self._suite(f"conftest.{namespace}", cases))
            lines.append("</testsuites>")
        self.writer.write("\n".join(lines) + "\n")

    def _suite(self, name: str, cases: list[_Case]) -> list[str]:
        classname = _escape(name.rsplit("/", 1)[-1])
        failures = sum(case.outcome is _Outcome.FAILED for case in cases)
        lines = [
            f'\t<testsuite tests="{len(cases)}" failures="{failures}" time="0.000" name="{_escape(name)}">',
            "\t\t<properties>",
            f'\t\t\t<property name="python.version" value="{_escape(self.version)}"></property>',
            "\t\t</properties>",
        ]
        for case in cases:
            opening = f'\t\t<testcase classname="{classname}" name="{_escape(case.name)}" time="0.000">'
            if case.outcome is _Outcome.FAILED:
                lines.append(opening)
                lines.append(f'\t\t\t<failure message="Failed" type="">{_escape(case.text)}</failure>')
                lines.append("\t\t</testcase>")
            elif case.outcome is _Outcome.SKIPPED:
                lines.append(opening)
                lines.append(f'\t\t\t<skipped message="{_escape(case.text)}"></skipped>')
                lines.append("\t\t</testcase>")
            else:
                lines.append(opening + "</testcase>")
        lines.append("\t</testsuite>")
        return lines

    def report(self, results, flag) -> None:
        unsupported_report("JUnit")