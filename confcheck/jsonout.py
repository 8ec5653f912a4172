"""Output as an indented JSON document."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .result import unsupported_report

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _escape_html(text: str) -> str:
    return "".join(_ESCAPES.get(char, char) for char in text)


@dataclass
class JSON:
    """Writes results as a tab-indented JSON array."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)

    def output(self, results) -> None:
        documents = []
        for result in results:
            data = result.to_dict()
            if data["filename"] == "-":
                data["filename"] = ""
            data.pop("queries", None)
            documents.append(data)

        text = json.dumps(documents, indent="\t", ensure_ascii=False)
        self.writer.write(_escape_html(text) + "\n")

    def report(self, results, flag) -> None:
        unsupported_report("JSON")