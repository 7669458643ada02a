#!/usr/bin/env python3
"""
Interactive directory browsing loop
"""

import logging
from pathlib import Path
from typing import Optional, Union

from file_explorer.core.directory_lister import DirectoryLister
from file_explorer.core.file_previewer import (
    DEFAULT_MAX_LINES,
    DEFAULT_PROBE_BYTES,
    FilePreviewer
)
from file_explorer.models.directory_entry import DirectoryListing
from file_explorer.models.navigation_state import NavigationState
from file_explorer.models.preview_result import PreviewResult
from file_explorer.ui.console import (
    MENU_CHANGE_DIR,
    MENU_EXIT,
    MENU_OPEN,
    MENU_REFRESH,
    MENU_UP,
    MENU_VIEW,
    ConsoleUI,
    InvalidNumber
)


class BrowseOperation:
    """
    Operation for interactive directory browsing

    Every cycle re-lists the current directory, renders it, reads one
    menu command and applies it. The navigation state lives on the
    instance; nothing is module-global.
    """

    def __init__(
        self,
        context=None,
        console: Optional[ConsoleUI] = None,
        lister: Optional[DirectoryLister] = None,
        previewer: Optional[FilePreviewer] = None,
        state: Optional[NavigationState] = None
    ):
        self.context = context
        self.logger = logging.getLogger(__name__)
        self.console = console or ConsoleUI()
        self.lister = lister or DirectoryLister()

        if previewer is None:
            previewer = FilePreviewer(
                max_lines=context.preview_max_lines if context else DEFAULT_MAX_LINES,
                probe_bytes=context.binary_probe_bytes if context else DEFAULT_PROBE_BYTES,
                output=self.console.stdout
            )
        self.previewer = previewer

        self.state = state or NavigationState()
        self.listing: Optional[DirectoryListing] = None

        self._handlers = {
            MENU_OPEN: self._command_open,
            MENU_VIEW: self._command_view,
            MENU_UP: self.go_up,
            MENU_CHANGE_DIR: self._command_change_directory,
            MENU_REFRESH: self.refresh,
        }

    @property
    def current_directory(self) -> Path:
        return self.state.current_directory

    def execute(self, start_dir: Optional[Union[str, Path]] = None) -> bool:
        """
        Run the browse loop until the user exits

        Args:
            start_dir: Starting directory (defaults to the working directory)

        Returns:
            True once the loop has ended normally
        """
        if start_dir is not None:
            self.state.current_directory = Path(start_dir).absolute()
        self.logger.info(f"Browsing from: {self.state.current_directory}")

        cycles = 0
        while self.run_once():
            cycles += 1

        self.logger.info(f"Browse loop ended after {cycles} commands in {self.state.current_directory}")
        return True

    def run_once(self) -> bool:
        """
        One render / read / apply cycle

        Returns:
            False when the loop should stop (exit command or end of input)
        """
        self.listing = self.lister.list(self.state.current_directory)
        self.console.render_listing(self.listing)
        self.console.render_menu()

        try:
            choice = self.console.read_int("> ")
        except InvalidNumber:
            self._report("Invalid input: please enter a number.")
            return True
        except EOFError:
            self.logger.info("End of input, leaving browse loop")
            return False

        if choice == MENU_EXIT:
            return False

        handler = self._handlers.get(choice)
        if handler is None:
            self.logger.debug(f"Unknown menu choice {choice}")
            self._report("Unknown choice.")
            return True

        try:
            handler()
        except EOFError:
            self.logger.info("End of input during command, leaving browse loop")
            return False
        return True

    # -- state transitions --

    def open_entry(self, index: int) -> bool:
        """
        Enter the directory at a 1-based index of the last listing

        Returns:
            True if the current directory changed
        """
        entry = self.listing.get(index) if self.listing is not None else None
        if entry is None or not entry.is_dir:
            self._report("Invalid directory selection.")
            return False

        self.state.current_directory = entry.path
        self.logger.debug(f"Opened {entry.path}")
        return True

    def view_entry(self, index: int) -> Optional[PreviewResult]:
        """
        Preview the file at a 1-based index of the last listing

        Returns:
            The preview outcome, or None for an invalid selection
        """
        entry = self.listing.get(index) if self.listing is not None else None
        if entry is None or entry.is_dir:
            self._report("Invalid file selection.")
            return None

        result = self.previewer.preview(entry.path)
        if not result.ok:
            self.console.render_preview_error(result)
        self.console.pause()
        return result

    def go_up(self) -> bool:
        """Move to the parent directory; the filesystem root stays put"""
        parent = self.state.current_directory.parent
        if parent == self.state.current_directory:
            return False
        self.state.current_directory = parent
        return True

    def change_directory(self, raw_path: str) -> bool:
        """
        Jump to a typed path

        ``~`` is expanded; relative paths are taken from the process
        working directory, not the browsed one. The target is canonicalized
        when possible; if that fails the absolute, unresolved path is used.

        Returns:
            True if the current directory changed
        """
        if not raw_path:
            self._report("Not a directory: ")
            return False

        target = Path(raw_path).expanduser().absolute()

        try:
            is_dir = target.is_dir()
        except OSError as e:
            self.logger.debug(f"Cannot inspect {target}: {e}")
            is_dir = False

        if not is_dir:
            self._report(f"Not a directory: {raw_path}")
            return False

        try:
            target = target.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            self.logger.debug(f"Keeping unresolved path {target}: {e}")

        self.state.current_directory = target
        self.logger.debug(f"Changed directory to {target}")
        return True

    def refresh(self) -> None:
        """Nothing to do; the next cycle lists again"""

    # -- prompting wrappers --

    def _command_open(self) -> None:
        index = self._read_index("Enter item # to open (directory): ")
        if index is not None:
            self.open_entry(index)

    def _command_view(self) -> None:
        index = self._read_index("Enter item # to view (file): ")
        if index is not None:
            self.view_entry(index)

    def _command_change_directory(self) -> None:
        self.change_directory(self.console.read_line("Enter path: "))

    def _read_index(self, prompt: str) -> Optional[int]:
        try:
            return self.console.read_int(prompt)
        except InvalidNumber:
            self._report("Invalid input: please enter a number.")
            return None

    def _report(self, message: str) -> None:
        """Inline error followed by an acknowledgment pause"""
        self.console.write(message)
        self.console.pause()
