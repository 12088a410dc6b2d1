"""
Value assignment policy for enum options.

An option declared without an explicit value gets ``0`` when the enum type
is empty and ``max(existing) + 1`` otherwise. Inherited values count toward
the maximum, so a derived type keeps counting from where its parent stopped.

    draft       -> 0
    published   -> 1
    moderated   -> 10   (explicit)
    deleted     -> 11
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import ErrorContext, InvalidValueTypeError


def next_value(existing: Iterable[int]) -> int:
    """Return the auto-assigned value following the existing ones."""
    return max(existing, default=-1) + 1


def resolve_value(
    explicit: object,
    existing: Iterable[int],
    context: ErrorContext | None = None,
) -> int:
    """
    Resolve the value of a new option.

    Args:
        explicit: Value supplied by the caller, or None for auto-assignment
        existing: Values already registered on the enum type
        context: Error context used when the explicit value is rejected

    Returns:
        The integer value the option will carry

    Raises:
        InvalidValueTypeError: If explicit is given and is not an integer
    """
    if explicit is None:
        return next_value(existing)
    if isinstance(explicit, bool) or not isinstance(explicit, int):
        raise InvalidValueTypeError(
            f"option value must be an integer, got {type(explicit).__name__} {explicit!r}",
            context,
        )
    return explicit
