"""
Error types for enum declaration, lookup, and manifest loading.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class EnuError(Exception):
    """Base exception for all enu errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return self._format_message()

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class DeclarationError(EnuError):
    """
    Raised when an option declaration is rejected.

    Declaration errors are programmer errors surfaced while an enum type is
    being defined. They are never retried.
    """

    pass


class DuplicateNameError(DeclarationError, KeyError):
    """Raised when an option name is already registered (inherited names included)."""

    pass


class ReservedNameError(DeclarationError, ValueError):
    """
    Raised when an option name would shadow part of the enum type interface.

    Examples:
    - ``options``, ``keys``, ``default`` and the other registry operations
    - ``draft_value`` once ``draft`` has been declared
    - any name starting with an underscore
    """

    pass


class InvalidNameError(DeclarationError, ValueError):
    """Raised when an option name is not a string or not a usable identifier."""

    pass


class InvalidValueTypeError(DeclarationError, TypeError):
    """Raised when an explicit option value is not an integer."""

    pass


class DuplicateValueError(DeclarationError, ValueError):
    """Raised when the resolved option value is already taken."""

    pass


class FrozenEnumError(DeclarationError, RuntimeError):
    """Raised when declaring an option on an enum type after freeze()."""

    pass


class EmptyEnumError(EnuError, LookupError):
    """Raised when asking an enum type with no options for its default."""

    pass


class UnknownOptionError(EnuError, KeyError):
    """Raised when looking up a name or value the enum type does not define."""

    pass


class ManifestError(EnuError):
    """
    Raised when an enu.toml manifest cannot be loaded or linked.

    Examples:
    - Missing file or invalid TOML
    - Malformed option entries
    - ``extends`` naming an undefined enum
    - Circular ``extends`` chains
    """

    pass


@dataclass
class ErrorContext:
    """
    Where an error happened.

    Attributes:
        enum: Name of the enum type being declared or queried
        option: Option name involved, if any
        source: Manifest file the declaration came from, if any
    """

    enum: str
    option: str | None = None
    source: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "enu.toml: PostStatus.draft"
        """
        location = self.enum
        if self.option is not None:
            location += f".{self.option}"
        if self.source is not None:
            location = f"{self.source}: {location}"
        return location
