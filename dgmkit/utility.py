"""Small helpers for two-component vectors."""

from __future__ import annotations


def _number_to_string(value):
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def vector_to_string(vec):
    """Format a two-component vector as ``[x, y]``.

    Floats are written with six decimal places, integers as they are.
    """
    x, y = vec
    return f"[{_number_to_string(x)}, {_number_to_string(y)}]"


def vector_sort_key(vec):
    """Sort key ordering vectors by ``y`` first and ``x`` second."""
    x, y = vec
    return (y, x)