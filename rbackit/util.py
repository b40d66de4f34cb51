"""Small helpers for matcher expressions and string collections."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_ASSERTION_ATTR = re.compile(r"[| =)(&<>,+\-!*/](r|p)\.")


def escape_assertion(s: str) -> str:
    """Rewrite ``r.x`` / ``p.x`` references as ``r_x`` / ``p_x``.

    Expression evaluation cannot handle dotted variable names, so the dot
    right after a leading ``r`` or ``p`` token is replaced with an underscore.
    """
    if s.startswith(("r", "p")):
        s = s.replace(".", "_", 1)
    return _ASSERTION_ATTR.sub(lambda m: m.group(0).replace(".", "_", 1), s)


def remove_comments(s: str) -> str:
    """Strip a ``#`` comment and the whitespace around what precedes it."""
    pos = s.find("#")
    if pos == -1:
        return s
    return s[:pos].strip()


def array_equals(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return True if both sequences hold the same items in the same order."""
    return list(a) == list(b)


def array_2d_equals(a: Sequence[Sequence[str]], b: Sequence[Sequence[str]]) -> bool:
    """Return True if both nested sequences are identical row by row."""
    return len(a) == len(b) and all(array_equals(x, y) for x, y in zip(a, b))


def array_remove_duplicates(s: Iterable[str]) -> list[str]:
    """Return the items of ``s`` without duplicates, keeping first occurrences."""
    return list(dict.fromkeys(s))


def array_to_string(s: Iterable[str]) -> str:
    """Join items into a printable comma-separated string."""
    return ", ".join(s)


def params_to_string(*args: str) -> str:
    """Join positional arguments into a printable comma-separated string."""
    return ", ".join(args)


def set_equals(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return True if both sequences hold the same items, ignoring order."""
    return sorted(a) == sorted(b)


def join_slice(a: str, *args: str) -> list[str]:
    """Return a new list with ``a`` followed by ``args``."""
    return [a, *args]


def set_subtract(a: Iterable[str], b: Iterable[str]) -> list[str]:
    """Return the items of ``a`` that are not in ``b``, in their original order."""
    excluded = set(b)
    return [x for x in a if x not in excluded]