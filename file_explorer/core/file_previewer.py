#!/usr/bin/env python3
"""
Text preview for a single file with a null-byte binary check and a line cap
"""

import io
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from file_explorer.models.preview_result import PreviewResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES = 200
DEFAULT_PROBE_BYTES = 4096

BINARY_NOTICE = "(Binary file preview suppressed)"
FOOTER = "----- End of preview -----"


def _require_positive(name: str, value: int) -> int:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


class FilePreviewer:
    """
    Streams the first lines of a text file to an output stream.

    The binary check only looks for a NUL byte in the first block, so
    text encodings that embed NULs (UTF-16) are reported as binary.
    """

    def __init__(
        self,
        max_lines: int = DEFAULT_MAX_LINES,
        probe_bytes: int = DEFAULT_PROBE_BYTES,
        output: Optional[TextIO] = None
    ):
        """
        Args:
            max_lines: Default number of content lines to show
            probe_bytes: Size of the initial block scanned for NUL bytes
            output: Stream to write to (defaults to sys.stdout at call time)
        """
        self.max_lines = _require_positive('max_lines', max_lines)
        self.probe_bytes = _require_positive('probe_bytes', probe_bytes)
        self.output = output

    def _emit(self, text: str = "") -> None:
        print(text, file=self.output or sys.stdout)

    def preview(self, path: Union[str, Path], max_lines: Optional[int] = None) -> PreviewResult:
        """
        Write a preview of a file

        Args:
            path: File to preview
            max_lines: Override for the line cap

        Returns:
            PreviewResult describing what was written. Filesystem errors
            are reported through ``error``, never raised.
        """
        path = Path(path)
        limit = self.max_lines if max_lines is None else _require_positive('max_lines', max_lines)

        try:
            handle = open(path, 'rb')
        except OSError as e:
            logger.warning(f"Cannot open {path} for preview: {e}")
            return PreviewResult(path=path, shown=False, error=e.strerror or str(e))

        with handle:
            try:
                probe = handle.read(self.probe_bytes)
            except OSError as e:
                logger.warning(f"Cannot read {path}: {e}")
                return PreviewResult(path=path, shown=False, error=e.strerror or str(e))

            self._emit()
            self._emit(f"----- File: {path.name} -----")

            if b'\0' in probe:
                logger.info(f"Suppressed binary preview of {path}")
                self._emit(BINARY_NOTICE)
                self._emit(FOOTER)
                return PreviewResult(path=path, shown=True, binary=True)

            handle.seek(0)
            lines_shown, truncated, error = self._stream_lines(handle, limit)

            if truncated:
                self._emit(f"... (truncated after {limit} lines)")
            self._emit(FOOTER)

        logger.debug(f"Previewed {lines_shown} lines of {path} (truncated={truncated})")
        return PreviewResult(
            path=path,
            shown=True,
            lines_shown=lines_shown,
            truncated=truncated,
            error=error
        )

    def _stream_lines(self, handle, limit: int):
        """
        Echo up to ``limit`` decoded lines

        Returns:
            Tuple of (lines written, more content remained, error text or None)
        """
        # newline=None accepts \n, \r\n and \r and hands each line back ending in \n
        text = io.TextIOWrapper(handle, encoding='utf-8', errors='replace', newline=None)
        count = 0
        truncated = False
        error = None

        try:
            for line in text:
                if count >= limit:
                    truncated = True
                    break
                self._emit(line[:-1] if line.endswith('\n') else line)
                count += 1
        except OSError as e:
            logger.warning(f"Read failed after {count} lines: {e}")
            error = e.strerror or str(e)
        finally:
            # the outer `with` owns the binary handle
            text.detach()

        return count, truncated, error


def preview_file(
    path: Union[str, Path],
    max_lines: int = DEFAULT_MAX_LINES,
    output: Optional[TextIO] = None
) -> PreviewResult:
    """Convenience wrapper around FilePreviewer.preview"""
    return FilePreviewer(max_lines=max_lines, output=output).preview(path)
