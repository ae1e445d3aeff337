"""
Named extension points for the helpdesk screens.

Plugin apps register two kinds of callbacks into a ``HookRegistry``:

* filters receive a value, return a (possibly new) value, and are
  chained: each filter sees what the previous one returned.  Used for
  things like the list of stylesheets a page includes.
* actions are fired for their output.  Each action may return a rendered
  HTML fragment; the host inserts all fragments inline where the
  extension point sits in its template.

Callbacks run in ascending priority order; callbacks with the same
priority run in registration order.  The host owns one registry per
process (``registry`` below) and hands it to plugins explicitly, so
tests can build their own and fire extension points without the host.
"""
from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 20


class HookRegistry:
    """Registry of filter and action callbacks keyed by extension point name."""

    def __init__(self) -> None:
        self._filters: dict[str, list[tuple[int, int, Callable]]] = defaultdict(list)
        self._actions: dict[str, list[tuple[int, int, Callable]]] = defaultdict(list)
        self._counter = itertools.count()

    # registration

    def add_filter(self, name: str, callback: Callable, priority: int = DEFAULT_PRIORITY) -> None:
        self._filters[name].append((priority, next(self._counter), callback))

    def add_action(self, name: str, callback: Callable, priority: int = DEFAULT_PRIORITY) -> None:
        self._actions[name].append((priority, next(self._counter), callback))

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def remove_all(self, name: str) -> None:
        """Drop every filter and action registered under ``name``."""
        self._filters.pop(name, None)
        self._actions.pop(name, None)

    def clear(self) -> None:
        self._filters.clear()
        self._actions.clear()

    # dispatch

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Thread ``value`` through every filter registered for ``name``.

        Extra positional arguments are passed unchanged to each filter.
        With no filters registered the value is returned as given.
        """
        for _, _, callback in sorted(self._filters.get(name, ()), key=_order):
            value = callback(value, *args)
        return value

    def do_action(self, name: str, *args: Any) -> list:
        """Fire every action for ``name`` and collect their non-None results."""
        callbacks = sorted(self._actions.get(name, ()), key=_order)
        if not callbacks:
            logger.debug("No actions registered for %s", name)
        outputs = []
        for _, _, callback in callbacks:
            result = callback(*args)
            if result is not None:
                outputs.append(result)
        return outputs


def _order(entry: tuple[int, int, Callable]) -> tuple[int, int]:
    return entry[0], entry[1]


# Process-wide registry owned by the host; plugin AppConfigs register into it.
registry = HookRegistry()
