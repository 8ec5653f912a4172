"""Sections of policy documentation built from rule annotations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class NoAnnotationsError(Exception):
    """Raised when no annotations were found for a policy directory."""

    def __init__(self, message: str = "no annotations found") -> None:
        super().__init__(message)


@dataclass
class Annotations:
    """Metadata attached to a package or rule."""

    title: str = ""
    description: str = ""
    scope: str = ""
    entrypoint: bool = False
    organizations: list[str] = field(default_factory=list)
    custom: dict[str, Any] = field(default_factory=dict)


@dataclass
class AnnotationsRef:
    """Annotations together with the path of the package or rule they describe."""

    path: tuple[str, ...]
    annotations: Annotations | None = None


def _ref_string(path) -> str:
    parts = list(path)
    if not parts:
        return ""
    text = parts[0]
    for part in parts[1:]:
        if _IDENTIFIER.match(part):
            text += "." + part
        else:
            escaped = part.replace("\\", "\\\\").replace('"', '\\"')
            text += f'["{escaped}"]'
    return text


@dataclass
class Section:
    """One titled piece of a documentation page."""

    rego_package_name: str = ""
    depth: int = 0
    markdown_heading: str = ""
    annotations: Annotations | None = None

    def equal(self, other: Section) -> bool:
        """True if heading, package name and title match."""
        own = self.annotations.title if self.annotations else None
        theirs = other.annotations.title if other.annotations else None
        return (
            self.markdown_heading == other.markdown_heading
            and self.rego_package_name == other.rego_package_name
            and own == theirs
        )


def convert_annotations_to_sections(refs) -> list[Section]:
    """Build sections with headings whose depth never jumps by more than one."""
    sections: list[Section] = []
    current_depth = 0
    offset = 1

    for index, entry in enumerate(refs):
        depth = len(entry.path) - offset

        if index == 0 and depth > 1:
            offset = depth

        if depth - current_depth > 1:
            depth = current_depth + 1
        current_depth = depth

        name = _ref_string(entry.path)
        if name.startswith("data."):
            name = name[len("data."):]

        sections.append(
            Section(
                rego_package_name=name,
                depth=depth,
                markdown_heading="#" * depth,
                annotations=entry.annotations,
            )
        )

    return sections