"""Output as a SARIF 2.1.0 log."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import Any, TextIO

from .result import CheckResults, Result, unsupported_report

SARIF_VERSION = "2.1.0"
TOOL_NAME = "conftest"

SUCCESS_DESC = "Policy was satisfied successfully"
SKIPPED_DESC = "Policy check was skipped"
FAILURE_DESC = "Policy violation"
WARNING_DESC = "Policy warning"
EXCEPTION_DESC = "Policy exception"

EXIT_NO_VIOLATIONS = "No policy violations found"
EXIT_VIOLATIONS = "Policy violations found"
EXIT_WARNINGS = "Policy warnings found"


def get_rule_id(namespace: str, rule_type: str) -> str:
    """A stable rule identifier built from the namespace and the rule type."""
    return f"{namespace}/{rule_type}"


def get_rule_description(rule_id: str) -> str:
    """The description that matches the rule type at the end of *rule_id*."""
    if rule_id.endswith("/success"):
        return SUCCESS_DESC
    if rule_id.endswith("/skip"):
        return SKIPPED_DESC
    if rule_id.endswith("/allow"):
        return EXCEPTION_DESC
    if rule_id.endswith("/warn"):
        return WARNING_DESC
    return FAILURE_DESC


def _to_slash(path: str) -> str:
    if "\\" in path:
        return PureWindowsPath(path).as_posix()
    return path


class _Run:
    """Accumulates the rules and results of one SARIF run."""

    def __init__(self) -> None:
        self.rules: list[dict[str, Any]] = []
        self.results: list[dict[str, Any]] = []
        self._indices: dict[str, int] = {}

    def _rule_index(self, rule_id: str, result: Result) -> int:
        if rule_id in self._indices:
            return self._indices[rule_id]
        rule: dict[str, Any] = {
            "id": rule_id,
            "shortDescription": {"text": get_rule_description(rule_id)},
        }
        if result.metadata:
            rule["properties"] = dict(result.metadata)
        self.rules.append(rule)
        index = len(self.rules) - 1
        self._indices[rule_id] = index
        return index

    def add(self, result: Result, namespace: str, rule_type: str, level: str, file_name: str) -> None:
        rule_id = get_rule_id(namespace, rule_type)
        index = self._rule_index(rule_id, result)
        self.results.append(
            {
                "ruleId": rule_id,
                "ruleIndex": index,
                "level": level,
                "message": {"text": result.message},
                "locations": [
                    {"physicalLocation": {"artifactLocation": {"uri": _to_slash(file_name)}}}
                ],
            }
        )


@dataclass
class SARIF:
    """Writes results as a SARIF log with one run."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)
    information_uri: str | None = None

    def output(self, results) -> None:
        results = CheckResults(results)
        run = _Run()

        for result in results:
            ns, name = result.namespace, result.file_name
            for failure in result.failures:
                run.add(failure, ns, "deny", "error", name)
            for warning in result.warnings:
                run.add(warning, ns, "warn", "warning", name)

            has_successes = result.successes > 0
            for exception in result.exceptions:
                run.add(exception, ns, "allow", "note", name)
                has_successes = True

            if result.has_failure() or result.has_warning():
                continue

            if has_successes:
                status = Result(message=SUCCESS_DESC, metadata={"description": SUCCESS_DESC})
                run.add(status, ns, "success", "none", name)
            else:
                status = Result(message=SKIPPED_DESC, metadata={"description": SKIPPED_DESC})
                run.add(status, ns, "skip", "none", name)

        exit_code = 0
        exit_desc = EXIT_NO_VIOLATIONS
        if results.has_failure():
            exit_code = 1
            exit_desc = EXIT_VIOLATIONS
        elif results.has_warning():
            exit_desc = EXIT_WARNINGS

        driver: dict[str, Any] = {"name": TOOL_NAME}
        if self.information_uri:
            driver["informationUri"] = self.information_uri
        driver["rules"] = run.rules

        report = {
            "version": SARIF_VERSION,
            "runs": [
                {
                    "tool": {"driver": driver},
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "exitCode": exit_code,
                            "exitCodeDescription": exit_desc,
                        }
                    ],
                    "results": run.results,
                }
            ],
        }
        self.writer.write(json.dumps(report, indent=2))

    def report(self, results, flag) -> None:
        unsupported_report("SARIF")