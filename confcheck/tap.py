"""Output in the Test Anything Protocol format."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .result import unsupported_report


@dataclass
class TAP:
    """Writes results as TAP lines."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)

    def output(self, results) -> None:
        write = self.writer.write
        for result in results:
            indicator = "-" if result.file_name == "-" else f"- {result.file_name}"
            namespace = "-" if result.namespace == "-" else f"- {result.namespace} -"

            total = result.total()
            if total == 0:
                return

            write(f"1..{total}\n")
            counter = 1

            def line(status: str, message: str) -> None:
                nonlocal counter
                write(f"{status} {counter} {indicator} {namespace} {message}\n")
                counter += 1

            for failure in result.failures:
                line("not ok", failure.message)

            sections = (
                ("# warnings", "not ok", [w.message for w in result.warnings]),
                ("# exceptions", "ok", [e.message for e in result.exceptions]),
                ("# skip", "ok", [s.message for s in result.skipped]),
                ("# successes", "ok", ["SUCCESS"] * result.successes),
            )
            for heading, status, messages in sections:
                if messages:
                    write(heading + "\n")
                    for message in messages:
                        line(status, message)

    def report(self, results, flag) -> None:
        unsupported_report("TAP")