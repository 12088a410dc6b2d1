"""
Enum type registry.

An EnumType is a type-level descriptor holding an ordered mapping of option
names to unique integer values. Every declared option gets two accessors on
the descriptor: one returning the name, one returning the value.

    PostStatus = define_enum(
        "PostStatus",
        ["draft", "published", ("moderated", 10), "deleted"],
    )

    PostStatus.draft            # "draft"
    PostStatus.deleted_value    # 11
    PostStatus.default()        # "draft"
    dict(PostStatus.options())  # {"draft": 0, "published": 1, "moderated": 10, "deleted": 11}

Derived types start from a snapshot of their parent's options and evolve
independently afterwards:

    ArchivedStatus = PostStatus.derive("ArchivedStatus")
    ArchivedStatus.add_option("archived")    # value 12

The option mapping is replaced (copy-on-write) on every declaration, so any
view handed out earlier keeps showing the options as they were.
"""

from __future__ import annotations

import keyword
import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, NamedTuple

from .errors import (
    DuplicateNameError,
    DuplicateValueError,
    EmptyEnumError,
    ErrorContext,
    FrozenEnumError,
    InvalidNameError,
    ReservedNameError,
    UnknownOptionError,
)
from .ir import EnumSpec, OptionSpec
from .values import resolve_value

logger = logging.getLogger(__name__)

VALUE_SUFFIX = "_value"

# Public interface of EnumType; option names may not shadow any of these.
RESERVED_NAMES = frozenset(
    {
        "accessor",
        "add_option",
        "contains_key",
        "default",
        "derive",
        "freeze",
        "is_frozen",
        "items",
        "iterate",
        "iterate_indexed",
        "keys",
        "name",
        "name_of",
        "option",
        "options",
        "parent",
        "title",
        "to_spec",
        "value_of",
        "values",
    }
)


class IndexedOption(NamedTuple):
    """An option paired with its declaration position."""

    name: str
    value: int
    position: int


OptionDeclaration = str | tuple[str, int | None]


class EnumType:
    """
    Descriptor for one enumerated type.

    Attributes:
        name: Enum type identifier (e.g. PostStatus)
        title: Human-readable title
        parent: Enum type this one was derived from, if any
    """

    def __init__(
        self,
        name: str,
        *,
        title: str | None = None,
        parent: EnumType | None = None,
    ) -> None:
        self.name = name
        self.title = title
        self.parent = parent
        self._lock = threading.RLock()
        self._frozen = False
        self._accessors: dict[str, Callable[[], Any]] = {}
        self._options: dict[str, int] = {}

        if parent is not None:
            with parent._lock:
                inherited = dict(parent._options)
            for key, value in inherited.items():
                self._install_accessors(key, value)
            self._options = inherited

    # =========================================================================
    # Declaration
    # =========================================================================

    def add_option(self, name: str, value: int | None = None) -> None:
        """
        Declare a new option at the end of the enum.

        Args:
            name: Option identifier; must be a valid Python identifier
            value: Explicit integer value, or None to auto-assign max + 1

        Raises:
            FrozenEnumError: If the enum type has been frozen
            InvalidNameError: If name is not a usable identifier
            DuplicateNameError: If name is already declared (inherited included)
            ReservedNameError: If name or its value accessor would shadow the interface
            InvalidValueTypeError: If value is given and is not an integer
            DuplicateValueError: If the resolved value is already used
        """
        with self._lock:
            context = ErrorContext(self.name, name if isinstance(name, str) else repr(name))
            if self._frozen:
                raise FrozenEnumError("enum type is frozen, no more options can be declared", context)

            key = self._check_name(name, context)
            if key in self._options:
                raise DuplicateNameError(f"'{key}' option already exists", context)

            value_accessor = f"{key}{VALUE_SUFFIX}"
            for candidate in (key, value_accessor):
                if self._is_reserved(candidate):
                    raise ReservedNameError(f"'{candidate}' key is reserved", context)

            resolved = resolve_value(value, self._options.values(), context)
            if resolved in self._options.values():
                raise DuplicateValueError(
                    f"value {resolved} is already used by '{self.name_of(resolved)}'", context
                )

            self._install_accessors(key, resolved)
            self._options = {**self._options, key: resolved}

        logger.debug("Declared option %s.%s = %d", self.name, key, resolved)

    option = add_option

    def freeze(self) -> EnumType:
        """End the declaration phase; later add_option calls fail."""
        with self._lock:
            self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def derive(self, name: str, *, title: str | None = None) -> EnumType:
        """Create a new enum type seeded with a snapshot of this one's options."""
        child = EnumType(name, title=title, parent=self)
        logger.debug("Derived %s from %s with %d options", name, self.name, len(child))
        return child

    def _check_name(self, name: object, context: ErrorContext) -> str:
        if not isinstance(name, str):
            raise InvalidNameError(
                f"option name must be a string, got {type(name).__name__}", context
            )
        key = str(name)
        if not key.isidentifier() or keyword.iskeyword(key):
            raise InvalidNameError(f"'{key}' is not a valid identifier", context)
        return key

    def _is_reserved(self, candidate: str) -> bool:
        return (
            candidate.startswith("_")
            or candidate in RESERVED_NAMES
            or candidate in self._accessors
        )

    def _install_accessors(self, key: str, value: int) -> None:
        self._accessors = {
            **self._accessors,
            key: lambda: key,
            f"{key}{VALUE_SUFFIX}": lambda: value,
        }

    # =========================================================================
    # Reading
    # =========================================================================

    def options(self) -> Mapping[str, int]:
        """Return a read-only view of the name -> value mapping."""
        return MappingProxyType(self._options)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._options)

    def values(self) -> tuple[int, ...]:
        return tuple(self._options.values())

    def contains_key(self, name: object) -> bool:
        return isinstance(name, str) and name in self._options

    def iterate(self) -> Iterator[tuple[str, int]]:
        """Iterate (name, value) pairs in declaration order."""
        return iter(self._options.items())

    items = iterate

    def iterate_indexed(self) -> Iterator[IndexedOption]:
        """Iterate (name, value, position) triples in declaration order."""
        return (
            IndexedOption(key, value, position)
            for position, (key, value) in enumerate(self._options.items())
        )

    def default(self) -> str:
        """
        Return the first declared option name.

        Raises:
            EmptyEnumError: If no option has been declared
        """
        for key in self._options:
            return key
        raise EmptyEnumError("empty enum type has no default", ErrorContext(self.name))

    def value_of(self, name: str) -> int:
        """Get the integer value of an option by name."""
        try:
            return self._options[name]
        except KeyError:
            raise UnknownOptionError(
                f"no option named '{name}'", ErrorContext(self.name)
            ) from None

    def name_of(self, value: int) -> str:
        """Get the option name carrying an integer value."""
        for key, option_value in self._options.items():
            if option_value == value:
                return key
        raise UnknownOptionError(f"no option with value {value!r}", ErrorContext(self.name))

    def accessor(self, name: str) -> Callable[[], Any]:
        """Return the zero-argument accessor registered under name."""
        try:
            return self._accessors[name]
        except KeyError:
            raise UnknownOptionError(
                f"no accessor named '{name}'", ErrorContext(self.name)
            ) from None

    def to_spec(self) -> EnumSpec:
        """Describe the enum type as a frozen EnumSpec."""
        return EnumSpec(
            name=self.name,
            title=self.title,
            parent=self.parent.name if self.parent is not None else None,
            options=[
                OptionSpec(name=option.name, value=option.value, position=option.position)
                for option in self.iterate_indexed()
            ],
        )

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __getattr__(self, attr: str) -> Any:
        # Only reached when normal lookup fails
        accessors = self.__dict__.get("_accessors", {})
        if attr in accessors:
            return accessors[attr]()
        raise AttributeError(
            f"enum type '{self.__dict__.get('name', '?')}' has no option or attribute '{attr}'"
        )

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr in self.__dict__.get("_accessors", {}):
            raise AttributeError(f"option accessor '{attr}' of '{self.name}' is read-only")
        super().__setattr__(attr, value)

    def __dir__(self) -> Iterable[str]:
        return sorted(set(super().__dir__()) | set(self._accessors))

    def __contains__(self, name: object) -> bool:
        return self.contains_key(name)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}: {value}" for key, value in self._options.items())
        return f"<EnumType {self.name} {{{body}}}>"


def _normalize_declarations(
    enum_name: str,
    options: Mapping[str, int | None] | Iterable[OptionDeclaration],
) -> Iterator[tuple[str, int | None]]:
    if isinstance(options, (str, bytes)):
        raise InvalidNameError(
            f"expected a sequence of option declarations, got {type(options).__name__} {options!r}",
            ErrorContext(enum_name),
        )
    if isinstance(options, Mapping):
        yield from options.items()
        return
    for entry in options:
        if isinstance(entry, str):
            yield entry, None
        elif isinstance(entry, tuple) and len(entry) == 2:
            yield entry[0], entry[1]
        else:
            raise InvalidNameError(
                f"expected an option name or (name, value) pair, got {entry!r}",
                ErrorContext(enum_name),
            )


def define_enum(
    name: str,
    options: Mapping[str, int | None] | Iterable[OptionDeclaration] = (),
    *,
    extends: EnumType | None = None,
    title: str | None = None,
    freeze: bool = False,
) -> EnumType:
    """
    Build an enum type from a list of option declarations.

    Args:
        name: Enum type identifier
        options: Mapping of name -> value (None to auto-assign), or an
            iterable of names and (name, value) pairs, in declaration order
        extends: Parent enum type to derive from
        title: Human-readable title
        freeze: Freeze the enum type once all options are declared

    Returns:
        The populated EnumType

    Example:
        >>> status = define_enum("Status", ["draft", ("moderated", 10), "deleted"])
        >>> dict(status.options())
        {'draft': 0, 'moderated': 10, 'deleted': 11}
    """
    if extends is not None:
        enum_type = extends.derive(name, title=title)
    else:
        enum_type = EnumType(name, title=title)

    for key, value in _normalize_declarations(name, options):
        enum_type.add_option(key, value)

    if freeze:
        enum_type.freeze()
    return enum_type
