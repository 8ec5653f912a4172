"""Human readable, optionally coloured, output."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from .result import summary_line, totals


class Color(Enum):
    """ANSI foreground colours used by the standard outputter."""

    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    CYAN = 36


def colorize(text: str, color: Color, enabled: bool) -> str:
    """Wrap *text* in the ANSI escape for *color* when *enabled*."""
    if not enabled:
        return text
    return f"\x1b[{color.value}m{text}\x1b[0m"


@dataclass
class Standard:
    """Writes results as plain lines with a coloured summary."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)
    tracing: bool = False
    no_color: bool = False
    suppress_exceptions: bool = False
    show_skipped: bool = False

    def _println(self, *parts: str) -> None:
        self.writer.write(" ".join(parts) + "\n")

    def output(self, results) -> None:
        enabled = not self.no_color

        if self.tracing:
            self._output_trace(results, enabled)
            return

        self._output_prints(results, enabled)

        for result in results:
            indicator = "-" if result.file_name == "-" else f"- {result.file_name}"
            namespace = "-" if result.namespace == "-" else f"- {result.namespace} -"

            for warning in result.warnings:
                self._println(colorize("WARN", Color.YELLOW, enabled), indicator, namespace, warning.message)
            for failure in result.failures:
                self._println(colorize("FAIL", Color.RED, enabled), indicator, namespace, failure.message)
            if not self.suppress_exceptions:
                for exception in result.exceptions:
                    self._println(
                        colorize("EXCP", Color.CYAN, enabled), indicator, namespace, exception.message
                    )

        tests, successes, warnings, failures, exceptions, skipped = totals(results)
        text = summary_line(tests, successes, warnings, failures, exceptions)
        if self.show_skipped:
            text += f", {skipped} skipped"

        if failures > 0:
            color = Color.RED
        elif warnings > 0:
            color = Color.YELLOW
        elif exceptions > 0:
            color = Color.CYAN
        else:
            color = Color.GREEN

        self._println()
        self._println(colorize(text, color, enabled))

    def _output_prints(self, results, enabled: bool) -> None:
        for result in results:
            for query in result.queries:
                for line in query.outputs:
                    self._println(colorize("PRNT ", Color.BLUE, enabled), "", line)

    def _output_trace(self, results, enabled: bool) -> None:
        for result in results:
            for query in result.queries:
                color = Color.GREEN if query.passed() else Color.RED
                self._println(
                    colorize(f"file: {result.file_name} | query: {query.query}", color, enabled)
                )
                for line in query.traces:
                    self._println(colorize("TRAC ", Color.BLUE, enabled), "", line)