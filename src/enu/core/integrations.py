"""
Adapters handing enum types to persistence and state-machine layers.

Both adapters only read the finished name -> value mapping:

    PostStatus = define_enum("PostStatus", ["draft", "published"])

    as_int_enum(PostStatus)      # IntEnum usable as an ORM enum column type
    choices(PostStatus)          # [(0, "Draft"), (1, "Published")]
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .registry import EnumType
from .strings import humanize


def as_int_enum(enum_type: EnumType) -> type[IntEnum]:
    """
    Build a standard library IntEnum with the same names and values.

    Member order follows declaration order.
    """
    return IntEnum(enum_type.name, list(enum_type.iterate()))


def choices(
    enum_type: EnumType,
    label: Callable[[str], str] = humanize,
) -> list[tuple[int, str]]:
    """
    Build (value, label) pairs for model-layer choice fields.

    Args:
        enum_type: Enum type to convert
        label: Function turning an option name into its display label

    Returns:
        Pairs in declaration order
    """
    return [(value, label(key)) for key, value in enum_type.iterate()]
