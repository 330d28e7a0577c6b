"""Output behavior injected into notification services.

Services never print directly: every diagnostic line goes through an
``OutputSink`` so the CLI can render it with rich while tests and embedders
capture it in memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Protocol

from rich.console import Console


class Style(Enum):
    """Output style of the current run."""

    NORMAL = "normal"
    JSON = "json"

    def __str__(self) -> str:
        return self.value


class Verbosity(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class OutputSink(Protocol):
    def write(self, message: str) -> None:  # pragma: no cover (interface)
        ...

    def write_error(self, message: str) -> None:  # pragma: no cover (interface)
        ...


class NullOutput:
    """Sink discarding every line."""

    def write(self, message: str) -> None:
        pass

    def write_error(self, message: str) -> None:
        pass


class BufferedOutput:
    """Sink keeping every line in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []
        self.error_lines: List[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)

    def write_error(self, message: str) -> None:
        self.error_lines.append(message)

    def get_output(self) -> str:
        """Return all lines, errors included, in a single string."""
        return "\n".join(self.lines + self.error_lines)


class ConsoleOutput:
    """Sink printing to stdout and stderr through rich consoles."""

    def __init__(
        self, console: Optional[Console] = None, error_console: Optional[Console] = None
    ):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def write(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def write_error(self, message: str) -> None:
        self.error_console.print(message, style="red", markup=False, highlight=False)


@dataclass
class OutputBehavior:
    style: Style = Style.NORMAL
    verbosity: Verbosity = Verbosity.NORMAL
    io: OutputSink = field(default_factory=NullOutput)

    def is_json(self) -> bool:
        return self.style is Style.JSON

    def is_quiet(self) -> bool:
        return self.verbosity <= Verbosity.QUIET

    def is_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERBOSE


@dataclass
class Options:
    """Cross-cutting options of a report run.

    ``json`` switches every service to machine-output-only mode: status lines
    are suppressed so the caller can print a JSON document on stdout.
    """

    json: bool = False


__all__ = [
    "Style",
    "Verbosity",
    "OutputSink",
    "NullOutput",
    "BufferedOutput",
    "ConsoleOutput",
    "OutputBehavior",
    "Options",
]
