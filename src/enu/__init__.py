"""
enu - declarative integer-backed enumerated types.

Named, ordered options with unique integer values, exposed as a lookup table
and as individually addressable accessors, with inheritance-based extension.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    DeclarationError,
    DuplicateNameError,
    DuplicateValueError,
    EmptyEnumError,
    EnuError,
    FrozenEnumError,
    InvalidNameError,
    InvalidValueTypeError,
    ManifestError,
    ReservedNameError,
    UnknownOptionError,
)
from .core.export import export_payload, to_json
from .core.ir import EnumSpec, OptionSpec
from .core.registry import RESERVED_NAMES, EnumType, IndexedOption, define_enum

__version__ = get_version()

__all__ = [
    "__version__",
    "EnumType",
    "IndexedOption",
    "define_enum",
    "RESERVED_NAMES",
    "EnumSpec",
    "OptionSpec",
    "export_payload",
    "to_json",
    "EnuError",
    "DeclarationError",
    "DuplicateNameError",
    "ReservedNameError",
    "InvalidNameError",
    "InvalidValueTypeError",
    "DuplicateValueError",
    "FrozenEnumError",
    "EmptyEnumError",
    "UnknownOptionError",
    "ManifestError",
]
