"""Output in the GitHub workflow-command format."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .result import summary_line, totals, unsupported_report


@dataclass
class GitHub:
    """Writes results as GitHub Actions workflow commands."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)

    def output(self, results) -> None:
        write = self.writer.write
        for result in results:
            write(
                f"::group::Testing '{result.file_name}' against {result.total()} "
                f"policies in namespace '{result.namespace}'\n"
            )
            for failure in result.failures:
                write(f"::error file={result.file_name}::{failure.message}\n")
            for warning in result.warnings:
                write(f"::warning file={result.file_name}::{warning.message}\n")
            for exception in result.exceptions:
                write(f"::notice file={result.file_name}::{exception.message}\n")
            for skipped in result.skipped:
                write(f"skipped file={result.file_name} {skipped.message}\n")
            if result.successes > 0:
                write(f"success file={result.file_name} {result.successes}\n")
            write("::endgroup::\n")

        tests, successes, warnings, failures, exceptions, _ = totals(results)
        write(summary_line(tests, successes, warnings, failures, exceptions) + "\n")

    def report(self, results, flag) -> None:
        unsupported_report("GitHub")