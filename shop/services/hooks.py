"""Named filter hooks that let other code adjust values before they are used.

A filter is a callable registered under a name. :func:`apply_filters` passes
a value through every callback registered for that name, lowest ``priority``
first and in registration order within a priority, and returns the final
value. Each callback receives the value returned by the previous one plus
any extra positional arguments given to :func:`apply_filters`.

Registry mutations are guarded by a lock; :func:`apply_filters` works on a
snapshot so callbacks may add or remove filters while running.

Filters added with :func:`filter_applied` never enter the shared registry.
They live in a context variable, so only code running in the same thread or
asyncio task sees them.
"""

from __future__ import annotations

import contextvars
import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

FilterCallback = Callable[..., Any]

_registry: Dict[str, List[Tuple[int, int, FilterCallback]]] = {}
_lock = threading.Lock()
_counter = 0
_scoped: contextvars.ContextVar[Tuple[Tuple[str, int, int, FilterCallback], ...]] = (
    contextvars.ContextVar("shop_scoped_filters", default=())
)


def _next_order() -> int:
    global _counter
    with _lock:
        _counter += 1
        return _counter


def _scoped_callbacks(name: str) -> List[Tuple[int, int, FilterCallback]]:
    return [
        (priority, order, callback)
        for scoped_name, priority, order, callback in _scoped.get()
        if scoped_name == name
    ]


def add_filter(
    name: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY
) -> None:
    """Register ``callback`` under ``name``."""

    order = _next_order()
    with _lock:
        callbacks = _registry.setdefault(name, [])
        callbacks.append((priority, order, callback))
        callbacks.sort(key=lambda entry: (entry[0], entry[1]))
    logger.debug("Added filter %r to %s (priority %s)", callback, name, priority)


def remove_filter(
    name: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY
) -> bool:
    """Unregister ``callback`` from ``name``.

    Returns ``True`` if a matching registration was removed. Only the most
    recent registration is removed when the same callback was added twice.
    """

    with _lock:
        callbacks = _registry.get(name, [])
        for position in range(len(callbacks) - 1, -1, -1):
            entry_priority, _, entry_callback = callbacks[position]
            if entry_priority == priority and entry_callback == callback:
                del callbacks[position]
                if not callbacks:
                    _registry.pop(name, None)
                return True
    return False


def has_filter(name: str) -> bool:
    with _lock:
        if _registry.get(name):
            return True
    return bool(_scoped_callbacks(name))


def apply_filters(name: str, value: Any, *args: Any) -> Any:
    """Return ``value`` after passing it through the filters for ``name``."""

    with _lock:
        callbacks = list(_registry.get(name, []))
    scoped = _scoped_callbacks(name)
    if scoped:
        callbacks = sorted(callbacks + scoped, key=lambda entry: (entry[0], entry[1]))
    for _, _, callback in callbacks:
        value = callback(value, *args)
    return value


def clear_filters(name: str | None = None) -> None:
    """Remove every filter for ``name``, or all filters when ``name`` is None."""

    with _lock:
        if name is None:
            _registry.clear()
        else:
            _registry.pop(name, None)


@contextmanager
def filter_applied(
    name: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY
) -> Iterator[None]:
    """Apply ``callback`` under ``name`` for the ``with`` block only.

    The callback is visible to the current thread or task alone and runs in
    priority order alongside the registered filters.
    """

    entry = (name, priority, _next_order(), callback)
    token = _scoped.set(_scoped.get() + (entry,))
    try:
        yield
    finally:
        _scoped.reset(token)


__all__ = [
    "DEFAULT_PRIORITY",
    "add_filter",
    "remove_filter",
    "has_filter",
    "apply_filters",
    "clear_filters",
    "filter_applied",
]
