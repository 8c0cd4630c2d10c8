"""Small string helpers shared by the element renderers."""

import re
from typing import Any, Iterable, List, Tuple

_KEY_RE = re.compile(r"[^a-z0-9_\-]")
_PERCENT_RE = re.compile(r"%[a-fA-F0-9][a-fA-F0-9]")
_CLASS_RE = re.compile(r"[^A-Za-z0-9_\-]")


def sanitize_key(value: Any) -> str:
    """Return ``value`` lower-cased with everything but ``[a-z0-9_-]`` removed."""
    return _KEY_RE.sub("", str(value or "").lower())


def sanitize_html_class(value: Any) -> str:
    """Return ``value`` reduced to characters that are valid in a CSS class."""
    return _CLASS_RE.sub("", _PERCENT_RE.sub("", str(value or "")))


def split_classes(value: Any) -> List[str]:
    return [part for part in str(value or "").split(" ") if part]


def join_classes(classes: Iterable[Any]) -> str:
    """Return sanitized, de-duplicated ``classes`` joined by single spaces."""

    seen: List[str] = []
    for cls in classes:
        cleaned = sanitize_html_class(cls)
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return " ".join(seen)


def normalize_selection(selected: Any) -> Tuple[str, ...]:
    """Return the selected value(s) as a tuple of strings.

    ``None``, ``False``, ``0`` and ``""`` mean nothing is selected. Elements
    of a list or tuple are kept as given, zero included.
    """

    if isinstance(selected, (list, tuple, set, frozenset)):
        return tuple(str(value) for value in selected if value is not None)
    if selected is None or selected is False or selected == 0 or selected == "":
        return ()
    return (str(selected),)


__all__ = [
    "sanitize_key",
    "sanitize_html_class",
    "split_classes",
    "join_classes",
    "normalize_selection",
]
