#!/usr/bin/env python3
"""
Directory listing: enumerate one directory, classify and sort its children
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from file_explorer.models.directory_entry import DirectoryEntry, DirectoryListing

logger = logging.getLogger(__name__)


class DirectoryLister:
    """
    Produces a fresh, sorted snapshot of a directory on every call.
    Nothing is cached; the next call sees the current on-disk state.
    """

    def list(self, path: Union[str, Path]) -> DirectoryListing:
        """
        List the immediate children of a directory

        Args:
            path: Directory to enumerate

        Returns:
            DirectoryListing sorted directories-first, then by name
            (case-insensitive). On enumeration failure the listing has
            no entries and carries the error text.
        """
        path = Path(path)
        items: List[DirectoryEntry] = []
        size_errors = 0

        try:
            # scandir hands back cached type info, one syscall per directory
            with os.scandir(path) as entries:
                for entry in entries:
                    try:
                        is_dir = entry.is_dir()
                    except OSError as e:
                        logger.debug(f"Cannot classify {entry.path}: {e}")
                        is_dir = False

                    size = 0
                    if not is_dir:
                        try:
                            size = entry.stat().st_size
                        except OSError as e:
                            size_errors += 1
                            logger.debug(f"Cannot stat {entry.path}: {e}")

                    items.append(DirectoryEntry(
                        name=entry.name,
                        path=path / entry.name,
                        is_dir=is_dir,
                        size=size
                    ))

        except OSError as e:
            logger.warning(f"Cannot read directory {path}: {e}")
            return DirectoryListing(path=path, error=self._describe(e, path))

        if size_errors:
            logger.info(f"{size_errors} entries in {path} listed without size")

        # list.sort is stable, so case-folded ties keep scandir order
        items.sort(key=DirectoryEntry.sort_key)
        logger.debug(f"Listed {len(items)} entries in {path}")

        return DirectoryListing(path=path, entries=tuple(items))

    @staticmethod
    def _describe(error: OSError, path: Path) -> str:
        """Readable one-line reason for a failed enumeration"""
        reason = error.strerror or str(error)
        return f"{reason}: {path}"


def list_directory(path: Union[str, Path]) -> DirectoryListing:
    """Convenience wrapper around DirectoryLister.list"""
    return DirectoryLister().list(path)
