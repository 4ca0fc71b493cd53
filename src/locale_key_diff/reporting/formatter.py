"""Output formatters used by the report printer."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

# ANSI SGR open/close pairs
STYLES = {
    "bold": ("\x1b[1m", "\x1b[22m"),
    "red_bright": ("\x1b[91m", "\x1b[39m"),
    "green_bright": ("\x1b[92m", "\x1b[39m"),
}


def escape_command_data(text: str) -> str:
    """Escape a message for a workflow command line."""
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ReportFormatter(ABC):
    """Where report lines go and how they are styled."""

    colors = True

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def style(self, style_name: str, text: object) -> str:
        if not self.colors:
            return str(text)
        open_code, close_code = STYLES[style_name]
        return f"{open_code}{text}{close_code}"

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")

    @abstractmethod
    def notice(self, message: str) -> None:
        """Emit a passing/informational line."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Emit a failing line."""

    @abstractmethod
    def start_group(self, title: str) -> None:
        """Open a collapsible group."""

    @abstractmethod
    def end_group(self) -> None:
        """Close the current group."""


class GitHubActionsFormatter(ReportFormatter):
    """Emits GitHub Actions workflow commands."""

    def notice(self, message: str) -> None:
        self._write(f"::notice::{escape_command_data(message)}")

    def error(self, message: str) -> None:
        self._write(f"::error::{escape_command_data(message)}")

    def start_group(self, title: str) -> None:
        self._write(f"::group::{escape_command_data(title)}")

    def end_group(self) -> None:
        self._write("::endgroup::")


class PlainFormatter(ReportFormatter):
    """Readable output for a local terminal."""

    def __init__(self, stream: Optional[TextIO] = None, colors: bool = False):
        super().__init__(stream)
        self.colors = colors
        self._depth = 0

    def _indent(self) -> str:
        return "  " * self._depth

    def notice(self, message: str) -> None:
        self._write(f"{self._indent()}{message}")

    def error(self, message: str) -> None:
        self._write(f"{self._indent()}ERROR: {message}")

    def start_group(self, title: str) -> None:
        self._write(f"{self._indent()}{title}")
        self._depth += 1

    def end_group(self) -> None:
        self._depth = max(0, self._depth - 1)
