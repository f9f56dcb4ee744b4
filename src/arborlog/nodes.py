"""Pure transformations of ``LoggerNode`` values.

None of these functions touch a registry; they return a new node and leave
the input untouched. Commit a transformed node with
``arborlog.registry.save_global_logger`` or use
``arborlog.registry.update_global_logger`` to read, transform and save in
one call.

The node is always the last argument so the helpers compose with
``functools.partial``:

```python
from functools import partial

update_global_logger(
    "app.db",
    compose(partial(set_level, Severity.DEBUG), partial(set_handlers, [handler])),
)
```
"""

from __future__ import annotations

from dataclasses import replace
from functools import reduce
from typing import Any, Callable, Iterable

from .types import Handler, LoggerNode, Severity

NodeTransform = Callable[[LoggerNode], LoggerNode]


def get_level(node: LoggerNode) -> Severity:
    """Return the threshold of ``node``; messages below it are ignored."""
    return node.threshold


def set_level(level: Any, node: LoggerNode) -> LoggerNode:
    """Return a copy of ``node`` with its threshold replaced."""
    return replace(node, threshold=Severity.parse(level))


def set_handlers(handlers: Iterable[Handler], node: LoggerNode) -> LoggerNode:
    """Return a copy of ``node`` whose handler list is exactly ``handlers``."""
    return replace(node, handlers=tuple(handlers))


def add_handler(handler: Handler, node: LoggerNode) -> LoggerNode:
    """Return a copy of ``node`` with ``handler`` placed before existing handlers."""
    return replace(node, handlers=(handler, *node.handlers))


def compose(*transforms: NodeTransform) -> NodeTransform:
    """Compose node transforms right-to-left.

    ``compose(f, g)(node)`` is ``f(g(node))``. With no arguments the result
    is the identity transform.
    """

    def _apply(node: LoggerNode) -> LoggerNode:
        return reduce(lambda acc, fn: fn(acc), reversed(transforms), node)

    return _apply
