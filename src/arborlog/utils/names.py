"""Dotted logger-name helpers.

Splitting is purely syntactic on the separator; empty segments are kept, so
``"a..b"`` has the ancestors ``"a"`` and ``"a."``. A prefix that equals the
root name (as produced by a leading separator) is not repeated, so the root
appears in a chain exactly once.
"""

from __future__ import annotations

from typing import List, Optional

from ..constants import NAME_SEPARATOR, ROOT_LOGGER_NAME


def ancestor_chain(name: str) -> List[str]:
    """Return every name from the root down to ``name``, root first.

    Args:
        name: Dotted logger name

    Returns:
        List of distinct names, starting with the root name and ending with ``name``

    Examples:
        >>> ancestor_chain("a.b.c")
        ['', 'a', 'a.b', 'a.b.c']
        >>> ancestor_chain("")
        ['']
        >>> ancestor_chain(".a")
        ['', '.a']
    """
    chain = [ROOT_LOGGER_NAME]
    if name == ROOT_LOGGER_NAME:
        return chain

    prefix: Optional[str] = None
    for part in name.split(NAME_SEPARATOR):
        prefix = part if prefix is None else f"{prefix}{NAME_SEPARATOR}{part}"
        if prefix != ROOT_LOGGER_NAME:
            chain.append(prefix)
    return chain
