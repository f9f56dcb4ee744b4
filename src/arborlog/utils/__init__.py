"""Utility helpers for arborlog."""

from __future__ import annotations

from .names import ancestor_chain

__all__ = [
    "ancestor_chain",
]
