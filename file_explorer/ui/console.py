#!/usr/bin/env python3
"""
Line-oriented console UI for the file browser
"""

import re
import sys
from typing import Optional, TextIO

from file_explorer.models.directory_entry import DirectoryListing
from file_explorer.models.preview_result import PreviewResult

MENU_OPEN = 1
MENU_VIEW = 2
MENU_UP = 3
MENU_CHANGE_DIR = 4
MENU_REFRESH = 5
MENU_EXIT = 0

MENU_ITEMS = (
    (MENU_OPEN, "Open directory by #"),
    (MENU_VIEW, "View file by #"),
    (MENU_UP, "Go up (..)"),
    (MENU_CHANGE_DIR, "Change directory by path"),
    (MENU_REFRESH, "Refresh"),
    (MENU_EXIT, "Exit"),
)

RULE_WIDTH = 60

# ASCII digits with an optional leading minus
_INTEGER = re.compile(r"-?\d+", re.ASCII)


class InvalidNumber(ValueError):
    """A line that should have held an integer did not"""


class ConsoleUI:
    """
    Renders listings and menus, and reads user input one line at a time.

    Streams default to sys.stdin / sys.stdout, looked up at call time so
    they can be swapped in tests. End of input raises EOFError.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    # -- rendering --

    def render_listing(self, listing: DirectoryListing) -> None:
        """Print the current directory header and its entry table"""
        self.write()
        self.write("Current directory:")
        self.write(f"  {listing.path}")
        self.write()

        if not listing.ok:
            self.write(f"Error listing directory: {listing.error}")

        if listing.is_empty:
            self.write("(empty)")
            return

        self.write(f"{'#':<5}{'TYPE':<6}{'SIZE':<12}NAME")
        self.write("-" * RULE_WIDTH)
        for index, entry in enumerate(listing, 1):
            self.write(f"{index:<5}{entry.display_type:<6}{entry.display_size:<12}{entry.name}")

    def render_menu(self) -> None:
        self.write()
        self.write("File Explorer Menu:")
        for number, label in MENU_ITEMS:
            self.write(f"  {number}) {label}")

    def render_preview_error(self, result: PreviewResult) -> None:
        if not result.shown:
            self.write(f"Could not open file: {result.path} ({result.error})")
        else:
            self.write(f"Preview stopped early: {result.error}")

    # -- input --

    def read_line(self, prompt: str) -> str:
        """
        Prompt and read one raw line, without its line terminator

        Raises:
            EOFError: If the input stream is exhausted
        """
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        """
        Prompt for an integer. The whole line is consumed either way.

        Raises:
            InvalidNumber: If the line is not an integer
            EOFError: If the input stream is exhausted
        """
        raw = self.read_line(prompt)
        if not _INTEGER.fullmatch(raw.strip()):
            raise InvalidNumber(raw)
        return int(raw.strip())

    def pause(self) -> None:
        """Wait for Enter; end of input just returns"""
        self.write()
        try:
            self.read_line("Press Enter to continue...")
        except EOFError:
            self.write()
