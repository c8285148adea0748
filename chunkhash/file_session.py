"""Positioned reads over a single open file."""

import logging
import os
from pathlib import Path

from chunkhash.errors import FileOpenError, ReadError, SeekError


class FileSession:
    """An open, seekable file together with its length in bytes."""

    def __init__(self, path: str | Path):
        """
        Open ``path`` for reading and measure its length.

        Args:
            path: Canonical path to the file

        Raises:
            FileOpenError: If the file cannot be opened
            SeekError: If seeking to the end of the file fails
        """
        self.logger = logging.getLogger(__name__)
        self.path = Path(path)

        try:
            self._file = open(self.path, 'rb')
        except OSError as e:
            raise FileOpenError(str(self.path), e) from e

        try:
            self.length = self._file.seek(0, os.SEEK_END)
        except OSError as e:
            self._file.close()
            raise SeekError(None, e) from e

        self.logger.debug(f"Opened {self.path} ({self.length} bytes)")

    def read_at(self, offset: int, size: int) -> bytes:
        """
        Read up to ``size`` bytes starting at ``offset``.

        Returns fewer bytes near the end of the file and ``b''`` at or past it.
        The request is capped at the bytes left in the file, so ``size`` may
        exceed both the file length and available memory.

        Raises:
            SeekError: If the file cannot be positioned at ``offset``
            ReadError: If the read fails
        """
        try:
            self._file.seek(offset)
        except OSError as e:
            raise SeekError(offset, e) from e

        try:
            return self._file.read(min(size, max(self.length - offset, 0)))
        except OSError as e:
            raise ReadError(offset, e) from e

    def close(self):
        """Close the underlying file."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
