"""Plain text stream handler."""

from __future__ import annotations

import sys
import threading
from typing import Any, Optional, TextIO

from ..types import Severity
from .base import BaseHandler


class StreamHandler(BaseHandler):
    """Write each accepted message as one line to a text stream.

    When no stream is given the handler writes to ``sys.stderr``, resolved at
    emit time so that test harnesses replacing ``sys.stderr`` are honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None, level: Any = Severity.DEBUG):
        super().__init__(level)
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def emit(self, severity: Severity, message: str) -> None:
        stream = self.stream
        with self._lock:
            stream.write(f"{message}\n")
            stream.flush()
