"""Output in the Azure DevOps pipeline logging-command format."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .result import ReportNotSupportedError, summary_line, totals


@dataclass
class AzureDevOps:
    """Writes results as Azure DevOps logging commands."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)

    def output(self, results) -> None:
        write = self.writer.write
        for result in results:
            name = result.file_name
            write(
                f"##[section]Testing '{name}' against {result.total()} "
                f"policies in namespace '{result.namespace}'\n"
            )
            write("##[group]See conftest results\n")
            for failure in result.failures:
                write(f"##vso[task.logissue type=error] file={name} --> {failure.message}\n")
            for warning in result.warnings:
                write(f"##vso[task.logissue type=warning] file={name} --> {warning.message}\n")
            for exception in result.exceptions:
                write(f"##vso[task.logissue type=warning] file={name} --> {exception.message}\n")
            for skipped in result.skipped:
                write(f"skipped file={name} {skipped.message}\n")
            if result.successes > 0:
                write(f"success file={name} {result.successes}\n")
            write("##[endgroup]\n")

        tests, successes, warnings, failures, exceptions, _ = totals(results)
        write(summary_line(tests, successes, warnings, failures, exceptions) + "\n")

    def report(self, results, flag) -> None:
        """Reject a report request: this format only supports plain output."""
        output_name = type(self).__name__
        raise ReportNotSupportedError(f"report is not supported in {output_name} output")