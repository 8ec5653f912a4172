"""Output as a bordered text table."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .result import unsupported_report

_MAX_CELL_WIDTH = 30
_PENALTY = 100_000
_DECIMAL = re.compile(r"^-?(?:\d{1,3}(?:,\d{3})*|\d+)(?:\.\d+)?$")


def _wrap_words(words: list[str], limit: int) -> list[list[str]]:
    """Split *words* into lines of minimum raggedness within *limit*."""
    count = len(words)
    spans = [[0] * count for _ in range(count)]
    for start in range(count):
        spans[start][start] = len(words[start])
        for end in range(start + 1, count):
            spans[start][end] = spans[start][end - 1] + 1 + len(words[end])

    breaks = [0] * count
    cost = [2**31 - 1] * count
    for start in range(count - 1, -1, -1):
        if spans[start][count - 1] <= limit:
            cost[start] = 0
            breaks[start] = count
            continue
        for end in range(start + 1, count):
            gap = limit - spans[start][end - 1]
            candidate = gap * gap + cost[end]
            if spans[start][end - 1] > limit:
                candidate += _PENALTY
            if candidate < cost[start]:
                cost[start] = candidate
                breaks[start] = end

    lines = []
    start = 0
    while start < count:
        lines.append(words[start : breaks[start]])
        start = breaks[start]
    return lines


def _wrap(text: str, limit: int) -> list[str]:
    words = text.replace("\n", " ").split(" ")
    limit = max([limit, *(len(word) for word in words)])
    return [" ".join(line) for line in _wrap_words(words, limit)]


def _cell(text: str) -> tuple[list[str], int]:
    """Return the wrapped lines of a cell and the width it claims."""
    raw = text.split("\n")
    width = min(max(len(line) for line in raw), _MAX_CELL_WIDTH)
    lines = _wrap(" ".join(raw), width)
    return lines, max([width, *(len(line) for line in lines)])


def _title(name: str) -> str:
    name = name.replace("_", " ").strip()
    return name.upper() or " "


def _center(text: str, width: int) -> str:
    gap = width - len(text)
    if gap <= 0:
        return text
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _align(text: str, width: int) -> str:
    if _DECIMAL.match(text.strip()):
        return text.rjust(width)
    return text.ljust(width)


def render_table(header, rows) -> str:
    """Render *header* and *rows* as a bordered table with wrapped cells."""
    header_cells = [_cell(_title(name)) for name in header]
    row_cells = [[_cell(str(value)) for value in row] for row in rows]

    widths = [width for _, width in header_cells]
    for cells in row_cells:
        for index, (_, width) in enumerate(cells):
            widths[index] = max(widths[index], width)

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def block(cells, pad) -> list[str]:
        height = max(len(lines) for lines, _ in cells)
        out = []
        for y in range(height):
            parts = [
                " " + pad(lines[y] if y < len(lines) else "", widths[index]) + " "
                for index, (lines, _) in enumerate(cells)
            ]
            out.append("|" + "|".join(parts) + "|")
        return out

    lines = [border, *block(header_cells, _center), border]
    for cells in row_cells:
        lines.extend(block(cells, _align))
    lines.append(border)
    return "\n".join(lines) + "\n"


@dataclass
class Table:
    """Writes results as one table row per evaluated policy."""

    writer: TextIO = field(default_factory=lambda: sys.stdout)

    def output(self, results) -> None:
        rows = []
        for result in results:
            base = (result.file_name, result.namespace)
            rows.extend(["success", *base, "SUCCESS"] for _ in range(result.successes))
            for kind, items in (
                ("exception", result.exceptions),
                ("warning", result.warnings),
                ("skipped", result.skipped),
                ("failure", result.failures),
            ):
                rows.extend([kind, *base, item.message] for item in items)

        if rows:
            self.writer.write(render_table(["result", "file", "namespace", "message"], rows))

    def report(self, results, flag) -> None:
        unsupported_report("table")