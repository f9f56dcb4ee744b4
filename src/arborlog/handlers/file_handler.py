"""Synchronous file logging handler.

This module provides a handler that appends accepted messages to a text
file, one line per message. The file is opened lazily on the first emit so
that attaching a handler never touches the filesystem by itself.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from loguru import logger

from ..types import Severity
from .base import BaseHandler


class FileHandler(BaseHandler):
    """Append accepted messages to a file.

    Note: The open file object is mutable state; a lock serialises writes
    from concurrent dispatches on the same handler.
    """

    def __init__(
        self,
        path: Union[str, Path],
        level: Any = Severity.DEBUG,
        mode: str = "a",
        encoding: str = "utf-8",
    ):
        """Initialize the file handler.

        Args:
            path: File to write to; parent directories are created on open
            level: Minimum severity this handler emits
            mode: File mode, "a" to append or "w" to truncate on first open
            encoding: Text encoding of the file
        """
        super().__init__(level)
        if mode not in ("a", "w"):
            msg = f"mode must be 'a' or 'w', got '{mode}'"
            raise ValueError(msg)
        self.path = Path(path)
        self.mode = mode
        self.encoding = encoding
        self._file: Optional[TextIO] = None
        self._lock = threading.Lock()

    def _open(self) -> TextIO:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        handle = self.path.open(self.mode, encoding=self.encoding)
        # Truncate only once; reopening after close() appends
        self.mode = "a"
        logger.debug(f"FileHandler opened {self.path}")
        return handle

    def emit(self, severity: Severity, message: str) -> None:
        with self._lock:
            if self._file is None:
                self._file = self._open()
            self._file.write(f"{message}\n")
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
                logger.debug(f"FileHandler closed {self.path}")

    def __repr__(self) -> str:
        return f"FileHandler(path={str(self.path)!r}, level={self.level.name})"
