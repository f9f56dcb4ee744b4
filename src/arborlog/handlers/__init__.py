"""Handlers for arborlog.

Each handler filters on its own minimum severity and writes accepted
messages to one destination.
"""

from __future__ import annotations

from .base import BaseHandler
from .file_handler import FileHandler
from .rich_handler import RichHandler
from .stream_handler import StreamHandler

__all__ = [
    "BaseHandler",
    "FileHandler",
    "RichHandler",
    "StreamHandler",
]
