"""Console input helpers and report generation."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from pathlib import Path
from typing import TextIO

from .data import State, StateRegistry

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

HEADER_FORMAT = "\033[1;32m{:<15}  {:<6}  {:<10}  {:>10}\n\033[0m"
ROW_FORMAT = "\033[1;36m{:<15}\033[0m  {:<6d}  {:>10.1f}  {:>10d}\n"
REPORT_NAME = "report.csv"


class Console:
    """Line-buffered console that reads typed values and writes prompts."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _fill(self) -> bool:
        if not self._pending:
            self._pending = self._stdin.readline()
        return bool(self._pending)

    def _discard_line(self) -> None:
        self._pending = ""

    def _scan(self, pattern: re.Pattern[str]) -> str | None:
        """Skip whitespace and consume one token matching pattern, if any."""
        while True:
            if not self._fill():
                raise EOFError("end of input")
            self._pending = self._pending.lstrip()
            if self._pending:
                break
        match = pattern.match(self._pending)
        if match is None:
            return None
        self._pending = self._pending[match.end():]
        return match.group()

    def _read_number(self, pattern: re.Pattern[str], convert):
        while (token := self._scan(pattern)) is None:
            self._discard_line()
            self.write("Invalid input, try again: ")
        self._discard_line()
        return convert(token)

    def read_int_in_range(self, low: int, high: int) -> int:
        """Read an integer between low and high inclusive, prompting again as needed."""
        while True:
            token = self._scan(_INT)
            if token is None:
                self._discard_line()
                self.write("Invalid input, try again: ")
                continue
            value = int(token)
            if value < low or value > high:
                self.write(f"Please enter a number between {low} and {high}: ")
                continue
            self._discard_line()
            return value

    def read_float(self, prompt: str) -> float:
        """Show prompt and read a floating-point number."""
        self.write(prompt)
        return self._read_number(_FLOAT, float)

    def read_int(self, prompt: str) -> int:
        """Show prompt and read an integer."""
        self.write(prompt)
        return self._read_number(_INT, int)

    def read_string(self, prompt: str, size: int = 50) -> str:
        """Read at most size-1 characters of a line, without its newline."""
        if prompt:
            self.write(prompt)
        if not self._fill():
            raise EOFError("end of input")
        chunk = self._pending[: size - 1]
        newline = chunk.find("\n")
        if newline >= 0:
            self._pending = self._pending[newline + 1:]
            return chunk[:newline]
        self._pending = self._pending[len(chunk):]
        return chunk


def format_header() -> str:
    """Coloured table header line."""
    return HEADER_FORMAT.format("Name", "Year", "Area(km2)", "Population")


def format_row(state: State) -> str:
    """Coloured table line for one state."""
    return ROW_FORMAT.format(state.name, state.year, state.area, state.population)


def _working_directory() -> str:
    try:
        return os.getcwd()
    except OSError:
        return "."


def write_report(registry: StateRegistry, directory: str | os.PathLike | None = None) -> Path:
    """Write the registry as CSV into directory and return the file's path."""
    folder = os.fspath(directory) if directory is not None else _working_directory()
    path = Path(f"{folder}/{REPORT_NAME}")
    with path.open("w", encoding="utf-8") as out:
        out.write("Name,Year,Area(km2),Population\n")
        for state in registry:
            out.write(f'"{state.name}",{state.year},{state.area:.1f},{state.population}\n')
    return path


def generate_report(
    registry: StateRegistry,
    console: Console,
    directory: str | os.PathLike | None = None,
) -> Path | None:
    """Write the CSV report, tell the user where, and open the folder on Windows."""
    folder = os.fspath(directory) if directory is not None else _working_directory()
    try:
        path = write_report(registry, folder)
    except OSError:
        console.write(f"Failed to create {folder}/{REPORT_NAME}\n")
        return None
    console.write(f"Report saved as {path}\n")
    if sys.platform == "win32":
        subprocess.run(["explorer", folder], check=False)
    return path