"""Console output abstraction.

Commands write through ``ConsoleProtocol`` so they can be exercised in tests
with ``MockConsole``. ``RichConsole`` is the production backend.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Kind of a captured output record."""

    DEFAULT = auto()
    ERROR = auto()
    WARNING = auto()
    HEADER = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def table(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        """Print a two-column key/value table."""
        ...


class RichConsole:
    """Console implementation using Rich."""

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.markup import escape

        self._escape = escape
        self._console = Console(stderr=stderr, highlight=False)

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {self._escape(message)}")

    def table(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        from rich.table import Table

        table = Table(title=title, title_justify="left", show_header=False, box=None)
        table.add_column(style="bold")
        table.add_column()
        for key, value in rows:
            table.add_row(self._escape(key), self._escape(value))
        self._console.print(table)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def table(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        self.outputs.append(OutputRecord(title, Style.HEADER))
        for key, value in rows:
            self.outputs.append(OutputRecord(f"{key}: {value}", Style.DEFAULT))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)
