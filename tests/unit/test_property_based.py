"""
Property-based tests using Hypothesis.

These tests verify registry invariants across a wide range of declaration
sequences.
"""

import keyword

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from enu.core.errors import DuplicateNameError, DuplicateValueError
from enu.core.export import export_payload
from enu.core.registry import RESERVED_NAMES, EnumType, define_enum

# Lowercase identifiers that never end in the accessor suffix
option_names = (
    st.from_regex(r"[a-z][a-z0-9]{0,11}", fullmatch=True)
    .filter(lambda name: not keyword.iskeyword(name))
    .filter(lambda name: name not in RESERVED_NAMES)
)

unique_names = st.lists(option_names, min_size=1, max_size=20, unique=True)


class TestRegistryProperties:
    @given(unique_names)
    @settings(max_examples=100)
    def test_auto_values_count_from_zero(self, names: list[str]) -> None:
        """Invariant: without explicit values, values are 0, 1, 2, ..."""
        enum = define_enum("Auto", names)
        assert enum.values() == tuple(range(len(names)))

    @given(unique_names, st.data())
    @settings(max_examples=100)
    def test_auto_value_follows_max(self, names: list[str], data: st.DataObject) -> None:
        """Invariant: every auto-assigned value is max(previous values) + 1."""
        enum = EnumType("Mixed")
        for name in names:
            explicit = data.draw(st.none() | st.integers(min_value=0, max_value=1000))
            if explicit is not None and explicit in enum.values():
                continue
            previous = enum.values()
            enum.add_option(name, explicit)
            if explicit is None:
                assert enum.value_of(name) == max(previous, default=-1) + 1
        assert len(set(enum.values())) == len(enum)

    @given(unique_names)
    @settings(max_examples=100)
    def test_default_is_first_declared(self, names: list[str]) -> None:
        """Invariant: default() is the first declared name."""
        assert define_enum("Ordered", names).default() == names[0]

    @given(unique_names)
    @settings(max_examples=100)
    def test_keys_values_correspond(self, names: list[str]) -> None:
        """Invariant: keys() and values() line up with options()."""
        enum = define_enum("Aligned", names)
        assert len(enum.keys()) == len(enum.values())
        assert list(zip(enum.keys(), enum.values(), strict=True)) == list(
            enum.options().items()
        )
        assert enum.keys() == tuple(names)

    @given(unique_names, st.integers(min_value=0, max_value=100))
    @settings(max_examples=100)
    def test_duplicate_name_always_fails(self, names: list[str], value: int) -> None:
        """Invariant: redeclaring a name fails whatever the value."""
        enum = define_enum("Dupes", names)
        with pytest.raises(DuplicateNameError):
            enum.add_option(names[-1], value + 1000)

    @given(unique_names, option_names)
    @settings(max_examples=100)
    def test_duplicate_value_always_fails(self, names: list[str], extra: str) -> None:
        """Invariant: a second name with a taken value fails."""
        assume(extra not in names)
        enum = define_enum("Dupes", names)
        with pytest.raises(DuplicateValueError):
            enum.add_option(extra, enum.values()[0])

    @given(unique_names, unique_names)
    @settings(max_examples=100)
    def test_derivation_snapshot(self, parent_names: list[str], more: list[str]) -> None:
        """Invariant: child is a superset of the parent at derivation time only."""
        parent = define_enum("Parent", parent_names)
        snapshot = dict(parent.options())
        child = parent.derive("Child")

        for name in more:
            if name not in parent:
                parent.add_option(name)

        assert dict(child.options()) == snapshot
        assert snapshot.items() <= dict(child.options()).items()

    @given(unique_names)
    @settings(max_examples=50)
    def test_export_payload_identity(self, names: list[str]) -> None:
        """Invariant: the export payload maps each name to itself, in order."""
        payload = export_payload(define_enum("Exported", names))
        assert list(payload) == names
        assert all(key == value for key, value in payload.items())
