"""Selection of an outputter by format name."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from .azuredevops import AzureDevOps
from .github import GitHub
from .jsonout import JSON
from .junit import JUnit
from .sarif import SARIF
from .standard import Standard
from .table import Table
from .tap import TAP


class OutputFormat(str, Enum):
    """The supported output formats."""

    STANDARD = "stdout"
    JSON = "json"
    TAP = "tap"
    TABLE = "table"
    JUNIT = "junit"
    GITHUB = "github"
    AZURE_DEVOPS = "azuredevops"
    SARIF = "sarif"


@dataclass
class Options:
    """Options used when building an outputter."""

    tracing: bool = False
    no_color: bool = False
    suppress_exceptions: bool = False
    show_skipped: bool = False
    junit_hide_message: bool = False
    file: TextIO | None = None


def get(format, options=None):
    """Return an outputter for *format*; unknown formats get the standard one."""
    options = options or Options()
    writer = options.file if options.file is not None else sys.stdout

    try:
        kind = OutputFormat(format)
    except ValueError:
        return Standard(writer=writer)

    if kind is OutputFormat.STANDARD:
        return Standard(
            writer=writer,
            no_color=options.no_color,
            suppress_exceptions=options.suppress_exceptions,
            tracing=options.tracing,
            show_skipped=options.show_skipped,
        )
    if kind is OutputFormat.JUNIT:
        return JUnit(writer=writer, hide_message=options.junit_hide_message)

    simple = {
        OutputFormat.JSON: JSON,
        OutputFormat.TAP: TAP,
        OutputFormat.TABLE: Table,
        OutputFormat.GITHUB: GitHub,
        OutputFormat.AZURE_DEVOPS: AzureDevOps,
        OutputFormat.SARIF: SARIF,
    }
    return simple[kind](writer=writer)


def outputs() -> list[str]:
    """The names of all available output formats."""
    return [kind.value for kind in OutputFormat]