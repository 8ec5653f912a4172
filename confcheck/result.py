"""Result types produced by a policy evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NoReturn


class ReportNotSupportedError(Exception):
    """Raised when an outputter cannot produce a test report."""


def unsupported_report(format_name: str) -> NoReturn:
    """Raise the error given when *format_name* output cannot produce a test report."""
    raise ReportNotSupportedError(f"report is not supported in {format_name} output")


def _sorted_value(value: Any) -> Any:
    """Return *value* with every mapping ordered by key, recursively."""
    if isinstance(value, dict):
        return {key: _sorted_value(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_sorted_value(item) for item in value]
    return value


@dataclass
class Result:
    """The result of a single rule evaluation."""

    message: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    outputs: list[str] = field(default_factory=list)

    @classmethod
    def from_metadata(cls, metadata: dict[str, Any]) -> Result:
        """Build a result from a rule's returned object, which must hold a string ``msg``."""
        if "msg" not in metadata:
            raise ValueError(f"rule missing msg field: {metadata}")
        message = metadata["msg"]
        if not isinstance(message, str):
            raise ValueError(f"msg field must be string: {metadata}")
        extra = {key: value for key, value in metadata.items() if key != "msg"}
        return cls(message=message, metadata=extra)

    def passed(self) -> bool:
        """True if the result did not fail a policy."""
        return self.message == ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"msg": self.message}
        if self.metadata:
            data["metadata"] = _sorted_value(self.metadata)
        if self.outputs:
            data["outputs"] = list(self.outputs)
        return data


@dataclass
class QueryResult:
    """The result of evaluating one fully qualified query."""

    query: str = ""
    results: list[Result] = field(default_factory=list)
    traces: list[str] = field(default_factory=list)
    outputs: list[str] = field(default_factory=list)

    def passed(self) -> bool:
        """True if every result of the query passed."""
        return all(result.passed() for result in self.results)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "query": self.query,
            "results": [result.to_dict() for result in self.results],
            "traces": list(self.traces),
        }
        if self.outputs:
            data["outputs"] = list(self.outputs)
        return data


@dataclass
class CheckResult:
    """The outcome of evaluating policies of one namespace against one file."""

    file_name: str = ""
    namespace: str = ""
    successes: int = 0
    skipped: list[Result] = field(default_factory=list)
    warnings: list[Result] = field(default_factory=list)
    failures: list[Result] = field(default_factory=list)
    exceptions: list[Result] = field(default_factory=list)
    queries: list[QueryResult] = field(default_factory=list)

    def has_failure(self) -> bool:
        return bool(self.failures)

    def has_warning(self) -> bool:
        return bool(self.warnings)

    def has_exception(self) -> bool:
        return bool(self.exceptions)

    def only_success(self) -> bool:
        """True if there are no failures, warnings or exceptions."""
        return not (self.failures or self.warnings or self.exceptions)

    def total(self) -> int:
        """Number of policies evaluated, whatever their outcome."""
        return (
            self.successes
            + len(self.failures)
            + len(self.warnings)
            + len(self.exceptions)
            + len(self.skipped)
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "filename": self.file_name,
            "namespace": self.namespace,
            "successes": self.successes,
        }
        for key, items in (
            ("skipped", self.skipped),
            ("warnings", self.warnings),
            ("failures", self.failures),
            ("exceptions", self.exceptions),
            ("queries", self.queries),
        ):
            if items:
                data[key] = [item.to_dict() for item in items]
        return data


class CheckResults(list):
    """A list of :class:`CheckResult` with aggregate queries."""

    def has_failure(self) -> bool:
        return any(result.has_failure() for result in self)

    def has_warning(self) -> bool:
        return any(result.has_warning() for result in self)

    def has_exception(self) -> bool:
        return any(result.has_exception() for result in self)

    def only_success(self) -> bool:
        return all(result.only_success() for result in self)

    def exit_code(self) -> int:
        """1 if any check failed, otherwise 0."""
        return 1 if self.has_failure() else 0

    def exit_code_fail_on_warn(self) -> int:
        """2 on failures, 1 on warnings, otherwise 0."""
        if self.has_failure():
            return 2
        if self.has_warning():
            return 1
        return 0


def summary_line(tests: int, successes: int, warnings: int, failures: int, exceptions: int) -> str:
    """The one-line totals summary shared by the text outputters."""
    parts = [
        f"{count} {noun}{'' if count == 1 else 's'}"
        for count, noun in (
            (tests, "test"),
            (warnings, "warning"),
            (failures, "failure"),
            (exceptions, "exception"),
        )
    ]
    parts.insert(1, f"{successes} passed")
    return ", ".join(parts)


def totals(results) -> tuple[int, int, int, int, int, int]:
    """Return (tests, successes, warnings, failures, exceptions, skipped) over *results*."""
    successes = sum(r.successes for r in results)
    warnings = sum(len(r.warnings) for r in results)
    failures = sum(len(r.failures) for r in results)
    exceptions = sum(len(r.exceptions) for r in results)
    skipped = sum(len(r.skipped) for r in results)
    tests = successes + warnings + failures + exceptions + skipped
    return tests, successes, warnings, failures, exceptions, skipped